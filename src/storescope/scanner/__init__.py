"""Schema inference over sampled keys and documents."""

from .aggregate import (
    build_fields,
    build_key_patterns,
    build_prefix_patterns,
    lookup_types,
    percent,
)
from .documents import flatten_document, infer_fields, observe_documents
from .keys import WILDCARD, cluster_keys, extract_pattern
from .prefix import cluster_prefixes, prefix_candidates, prefix_depth
from .sampling import Sample, sample_items
from .types import MISSING, TYPE_TAGS, tag_value

__all__ = [
    "MISSING",
    "TYPE_TAGS",
    "WILDCARD",
    "Sample",
    "build_fields",
    "build_key_patterns",
    "build_prefix_patterns",
    "cluster_keys",
    "cluster_prefixes",
    "extract_pattern",
    "flatten_document",
    "infer_fields",
    "lookup_types",
    "observe_documents",
    "percent",
    "prefix_candidates",
    "prefix_depth",
    "sample_items",
    "tag_value",
]

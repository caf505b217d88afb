"""storescope - schema inference for key-value and document stores."""

__version__ = "0.1.0"

from .catalog import Catalog
from .config import KeyHeuristics, ScanLimits
from .entities import (
    Collection,
    DocumentSchemaResult,
    FieldInfo,
    KeyPattern,
    KeyPatternResult,
    Store,
    TypeShare,
)
from .inference import infer_documents, infer_key_patterns, infer_key_prefixes

__all__ = [
    "Catalog",
    "Collection",
    "DocumentSchemaResult",
    "FieldInfo",
    "KeyHeuristics",
    "KeyPattern",
    "KeyPatternResult",
    "ScanLimits",
    "Store",
    "TypeShare",
    "infer_documents",
    "infer_key_patterns",
    "infer_key_prefixes",
]

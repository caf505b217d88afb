"""Field observations from sampled documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl

from ..entities import FieldInfo
from .aggregate import build_fields
from .types import tag_value

# Schema of the observation frame: one row per (document, leaf path)
OBSERVATION_SCHEMA: dict[str, type[pl.DataType]] = {
    "doc": pl.Int64,
    "path": pl.String,
    "type": pl.String,
}


def flatten_document(document: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into dotted paths.

    Arrays and scalars are leaves and are never expanded element-wise. An
    empty nested mapping has no keys and so contributes no path.
    """
    result: dict[str, Any] = {}
    for key, value in document.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            result.update(flatten_document(value, path))
        else:
            result[path] = value
    return result


def observe_documents(documents: Sequence[Mapping[str, Any]]) -> pl.DataFrame:
    """Build the (doc, path, type) observation frame for a sample."""
    rows = [
        (index, path, tag_value(value))
        for index, document in enumerate(documents)
        for path, value in flatten_document(document).items()
    ]
    return pl.DataFrame(rows, schema=OBSERVATION_SCHEMA, orient="row")


def infer_fields(documents: Sequence[Mapping[str, Any]]) -> list[FieldInfo]:
    """Infer per-field type distribution and occurrence, sorted by path."""
    if not documents:
        return []
    return build_fields(observe_documents(documents), len(documents))

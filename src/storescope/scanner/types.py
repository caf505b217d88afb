"""Coarse type tagging of sampled values."""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Number
from typing import Any

from bson import Decimal128, ObjectId, Timestamp


class _Missing:
    """Marker for a value that disappeared between listing and fetching."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

# Tags produced by tag_value
TYPE_TAGS = (
    "null",
    "undefined",
    "boolean",
    "integer",
    "float",
    "string",
    "date",
    "array",
    "object",
    "objectId",
)


def _number_tag(value: Any) -> str:
    """Tag a numeric value as integer or float."""
    if isinstance(value, Decimal128):
        value = value.to_decimal()
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "integer" if value.is_integer() else "float"
    if isinstance(value, Decimal):
        if not value.is_finite():
            return "float"
        return "integer" if value == value.to_integral_value() else "float"
    try:
        as_float = float(value)
    except (TypeError, ValueError, OverflowError):
        return "float"
    if math.isfinite(as_float) and as_float.is_integer():
        return "integer"
    return "float"


def tag_value(value: Any) -> str:
    """Classify one value into a coarse type tag.

    Arrays and dates are checked before generic mappings, and store-native
    identifiers (BSON ObjectId) before the object fallback. Booleans are
    checked before numbers because ``bool`` is an ``int`` subclass. Anything
    unrecognized is tagged ``string``.
    """
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, (dt.date, dt.datetime, Timestamp)):
        return "date"
    if isinstance(value, ObjectId):
        return "objectId"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (Number, Decimal128)):
        return _number_tag(value)
    return "string"

"""storescope entity classes."""

from .base import Entity
from .collection import Collection
from .field_info import FieldInfo, TypeShare
from .key_pattern import KeyPattern
from .result import DocumentSchemaResult, KeyPatternResult
from .store import Store

__all__ = [
    "Entity",
    "Collection",
    "DocumentSchemaResult",
    "FieldInfo",
    "KeyPattern",
    "KeyPatternResult",
    "Store",
    "TypeShare",
]

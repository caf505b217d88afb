"""Inferred document field entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import Entity


@dataclass
class TypeShare(Entity):
    """Share of a type among the observations of one field (0-100)."""

    type: str
    percentage: int


@dataclass
class FieldInfo(Entity):
    """A dotted field path inferred from sampled documents."""

    path: str
    types: list[TypeShare] = field(default_factory=list)
    occurrence: int = 0
    collection_id: str | None = None

"""Collection entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import Entity


@dataclass
class Collection(Entity):
    """A document collection whose fields were inferred from a sample."""

    id: str
    name: str | None = None
    store_id: str | None = None
    nb_document: int | None = None
    sample_size: int | None = None
    truncated: bool = False
    indexes: list[dict[str, Any]] = field(default_factory=list)

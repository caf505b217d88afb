"""Store entity."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Entity


@dataclass
class Store(Entity):
    """A live data store inspected by the catalog."""

    id: str
    name: str | None = None
    type: str | None = None
    description: str | None = None
    version: str | None = None
    data_path: str | None = None
    total_keys: int | None = None
    last_update_date: str | None = None

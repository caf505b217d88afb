"""Key pattern entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import Entity


@dataclass
class KeyPattern(Entity):
    """A cluster of keys sharing a structural shape.

    ``count`` is the number of keys assigned to the pattern, ``sample_keys``
    the first keys seen for it. ``types`` maps a value type to the number of
    member keys holding it; keys whose type lookup failed are missing from
    ``types`` but still counted. ``depth`` is only set for hierarchical
    (slash-delimited) namespaces.
    """

    pattern: str
    count: int
    sample_keys: list[str] = field(default_factory=list)
    types: dict[str, int] = field(default_factory=dict)
    depth: int | None = None
    store_id: str | None = None

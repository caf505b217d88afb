"""Inference pass results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .field_info import FieldInfo
from .key_pattern import KeyPattern


@dataclass(frozen=True)
class KeyPatternResult:
    """Key patterns discovered by one pass over a key space.

    ``total_items_scanned`` counts every sampled key, including keys whose
    type lookup failed (``failed_lookups``). ``truncated`` is set when the
    scan stopped on the iteration cap or the deadline instead of on cursor
    exhaustion or ``max_items``.
    """

    key_patterns: list[KeyPattern] = field(default_factory=list)
    total_items_scanned: int = 0
    truncated: bool = False
    stop_reason: str | None = None
    failed_lookups: int = 0


@dataclass(frozen=True)
class DocumentSchemaResult:
    """Fields inferred from one sample of documents."""

    fields: list[FieldInfo] = field(default_factory=list)
    sample_size: int = 0
    total_count: int = 0
    truncated: bool = False
    stop_reason: str | None = None

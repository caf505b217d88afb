"""Common utilities for store readers."""

from __future__ import annotations

import fnmatch
from collections.abc import Sequence
from datetime import datetime, timezone


def get_now_iso() -> str:
    """Get current UTC date as YYYY/MM/DD."""
    return datetime.now(tz=timezone.utc).strftime("%Y/%m/%d")


def decode_key(value: bytes | str) -> str:
    """Decode a key returned by a store driver."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def match_patterns(items: list[str], patterns: Sequence[str]) -> set[str]:
    """Match items against glob patterns."""
    matched: set[str] = set()
    for pattern in patterns:
        if "*" in pattern or "?" in pattern:
            matched.update(fnmatch.filter(items, pattern))
        elif pattern in items:
            matched.add(pattern)
    return matched


def filter_names(
    names: list[str],
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> list[str]:
    """Filter names by include/exclude glob patterns, sorted."""
    if include is not None:
        included = match_patterns(names, include)
        names = [n for n in names if n in included]

    if exclude is not None:
        excluded = match_patterns(names, exclude)
        names = [n for n in names if n not in excluded]

    return sorted(names)

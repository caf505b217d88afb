"""Hierarchical prefix clustering for slash-delimited key spaces."""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"


def prefix_candidates(key: str) -> list[str]:
    """Return the prefixes of a key at every depth.

    Empty segments are ignored, so ``/services//api/v1`` gives
    ``/services/``, ``/services/api/`` and ``/services/api/v1/``.
    """
    parts = [p for p in key.split(SEPARATOR) if p]
    return [
        SEPARATOR + SEPARATOR.join(parts[:depth]) + SEPARATOR
        for depth in range(1, len(parts) + 1)
    ]


def prefix_depth(prefix: str) -> int:
    """Depth of a rendered prefix (``/a/`` is 1, ``/a/b/`` is 2)."""
    return prefix.count(SEPARATOR) - 1


def cluster_prefixes(keys: Iterable[str]) -> dict[str, list[str]]:
    """Map each candidate prefix to its unique member keys, in first-seen order."""
    groups: dict[str, dict[str, None]] = {}
    for key in keys:
        for prefix in prefix_candidates(key):
            groups.setdefault(prefix, {})[key] = None
    return {prefix: list(members) for prefix, members in groups.items()}

"""Flat key clustering by separator and identifier suffix."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from .._ids import is_identifier_token
from ..config import KeyHeuristics

WILDCARD = "*"

_WORD_DIGITS = re.compile(r"([a-zA-Z_]+)([0-9]+)")


@lru_cache(maxsize=32)
def _hex_patterns(heuristics: KeyHeuristics) -> tuple[re.Pattern[str], re.Pattern[str]]:
    return (
        re.compile(rf"[a-z]+[0-9a-f]{{{heuristics.min_hex_key_run},}}", re.IGNORECASE),
        re.compile(rf"[0-9a-f]{{{heuristics.min_hex_run},}}", re.IGNORECASE),
    )


def _split_pattern(key: str, sep: str, heuristics: KeyHeuristics) -> str | None:
    """Wildcard the first identifier token after the first one, drop the rest."""
    parts = key.split(sep)
    for index, part in enumerate(parts[1:], start=1):
        if is_identifier_token(part, heuristics):
            return sep.join([*parts[:index], WILDCARD])
    return None


def extract_pattern(key: str, heuristics: KeyHeuristics | None = None) -> str:
    """Generalize a key into a pattern.

    Examples: ``user:123`` and ``user:1:name`` give ``user:*``,
    ``cache_product_456`` gives ``cache_product_*``, ``user123`` gives
    ``user*``. Keys with no recognizable identifier fall back to a short
    literal prefix, and very short keys are their own pattern.
    """
    heuristics = heuristics or KeyHeuristics()

    for sep in heuristics.separators:
        if sep in key:
            pattern = _split_pattern(key, sep, heuristics)
            if pattern is not None:
                return pattern

    match = _WORD_DIGITS.fullmatch(key)
    if match:
        return match.group(1) + WILDCARD

    hex_key, hex_run = _hex_patterns(heuristics)
    if hex_key.search(key):
        return hex_run.sub(WILDCARD, key)

    if len(key) >= heuristics.fallback_min_key_length:
        size = min(heuristics.fallback_prefix_length, len(key) // 2)
        return key[:size] + WILDCARD

    return key


def cluster_keys(
    keys: Iterable[str], heuristics: KeyHeuristics | None = None
) -> dict[str, list[str]]:
    """Group keys by pattern, preserving first-seen order of patterns and keys."""
    heuristics = heuristics or KeyHeuristics()
    groups: dict[str, list[str]] = {}
    for key in keys:
        groups.setdefault(extract_pattern(key, heuristics), []).append(key)
    return groups

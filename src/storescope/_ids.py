"""Identifier token detection and catalog ID utilities."""

from __future__ import annotations

import re
from functools import lru_cache

from .config import KeyHeuristics

# Separator for catalog ID components (store---collection---field)
ID_SEPARATOR = "---"

# Valid ID pattern: a-zA-Z0-9_, - (and space)
_INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9_,\- ]")

_DIGITS = re.compile(r"[0-9]+")
_DIGIT_SUFFIX = re.compile(r"[0-9]\Z")


def sanitize_id(value: str) -> str:
    """Replace invalid characters with underscore."""
    return _INVALID_ID_CHARS.sub("_", value)


def make_id(*parts: str) -> str:
    """Join parts with ID_SEPARATOR."""
    return ID_SEPARATOR.join(parts)


@lru_cache(maxsize=32)
def _token_patterns(heuristics: KeyHeuristics) -> tuple[re.Pattern[str], ...]:
    return (
        re.compile(rf"[0-9a-f]{{{heuristics.min_hex_length},}}", re.IGNORECASE),
        re.compile(rf"[0-9a-z]{{{heuristics.min_alnum_length},}}", re.IGNORECASE),
    )


def is_identifier_token(token: str, heuristics: KeyHeuristics | None = None) -> bool:
    """Return True if a key token looks like a generated identifier.

    A token is an identifier when it is all digits, a long hex string, a long
    alphanumeric string, or a word ending in digits (``game1``, ``post42``).
    """
    heuristics = heuristics or KeyHeuristics()
    if _DIGITS.fullmatch(token):
        return True
    hex_id, long_alnum = _token_patterns(heuristics)
    if hex_id.fullmatch(token) or long_alnum.fullmatch(token):
        return True
    return (
        _DIGIT_SUFFIX.search(token) is not None
        and len(token) >= heuristics.min_suffix_token_length
    )

"""Merge clustering and inference outputs into final statistics."""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, wait

import polars as pl

from ..entities import FieldInfo, KeyPattern, TypeShare
from .prefix import prefix_depth

# Sample keys kept per pattern
FLAT_SAMPLE_LIMIT = 10
PREFIX_SAMPLE_LIMIT = 5

# Hierarchical prefixes kept after sorting
MAX_PREFIX_PATTERNS = 50


def percent(count: int, total: int) -> int:
    """Round count / total * 100 to the nearest integer, halves up."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def lookup_types(
    keys: Sequence[str],
    lookup: Callable[[str], str],
    *,
    workers: int = 1,
    deadline: float | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> tuple[list[str | None], int]:
    """Look up the value type of each key, None where the lookup failed.

    Results are aligned with ``keys`` whatever the number of workers. Keys
    not looked up before ``deadline`` (a ``clock`` value) are left as None;
    their number is returned alongside the types.
    """

    def _safe_lookup(key: str) -> str | None:
        try:
            return lookup(key)
        except Exception:
            return None

    types: list[str | None] = [None] * len(keys)

    if workers <= 1 or len(keys) <= 1:
        for index, key in enumerate(keys):
            if deadline is not None and clock() >= deadline:
                return types, len(keys) - index
            types[index] = _safe_lookup(key)
        return types, 0

    pool = ThreadPoolExecutor(max_workers=workers)
    try:
        futures = [pool.submit(_safe_lookup, key) for key in keys]
        timeout = None if deadline is None else max(deadline - clock(), 0.0)
        wait(futures, timeout=timeout)
    finally:
        # Lookups still hanging in the store are abandoned, not awaited
        pool.shutdown(wait=False, cancel_futures=True)

    skipped = 0
    for index, future in enumerate(futures):
        if future.done() and not future.cancelled():
            types[index] = future.result()
        else:
            skipped += 1
    return types, skipped



def _histogram(types: list[str]) -> dict[str, int]:
    counts = Counter(types)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def build_key_patterns(
    groups: Mapping[str, Sequence[str]],
    types: Mapping[str, str | None] | None = None,
    *,
    sample_limit: int = FLAT_SAMPLE_LIMIT,
) -> list[KeyPattern]:
    """Build flat key patterns sorted by count descending.

    Ties keep the first-seen order of patterns. Keys without a known type
    are counted but left out of the type histogram.
    """
    patterns: list[KeyPattern] = []
    for pattern, keys in groups.items():
        key_types: list[str] = []
        if types is not None:
            key_types = [t for t in (types.get(key) for key in keys) if t is not None]
        patterns.append(
            KeyPattern(
                pattern=pattern,
                count=len(keys),
                sample_keys=list(keys[:sample_limit]),
                types=_histogram(key_types),
            )
        )
    patterns.sort(key=lambda p: -p.count)
    return patterns


def build_prefix_patterns(
    groups: Mapping[str, Sequence[str]],
    *,
    sample_limit: int = PREFIX_SAMPLE_LIMIT,
    max_patterns: int = MAX_PREFIX_PATTERNS,
) -> list[KeyPattern]:
    """Build hierarchical prefix patterns.

    Top-level prefixes are always kept, deeper ones only when shared by at
    least two keys. Sorted by depth, then count descending.
    """
    patterns: list[KeyPattern] = []
    for prefix, keys in groups.items():
        depth = prefix_depth(prefix)
        if depth != 1 and len(keys) < 2:
            continue
        patterns.append(
            KeyPattern(
                pattern=prefix,
                count=len(keys),
                sample_keys=list(keys[:sample_limit]),
                depth=depth,
            )
        )
    patterns.sort(key=lambda p: (p.depth, -p.count))
    return patterns[:max_patterns]


def build_fields(observations: pl.DataFrame, nb_documents: int) -> list[FieldInfo]:
    """Aggregate a (doc, path, type) observation frame into sorted fields."""
    if observations.is_empty():
        return []

    occurrences = observations.group_by("path").agg(
        pl.col("doc").n_unique().alias("occurrences")
    )
    type_counts = (
        observations.group_by("path", "type")
        .agg(pl.len().alias("count"))
        .join(occurrences, on="path")
        .sort(["path", "count", "type"], descending=[False, True, False])
    )

    fields: list[FieldInfo] = []
    for row in type_counts.iter_rows(named=True):
        if not fields or fields[-1].path != row["path"]:
            fields.append(
                FieldInfo(
                    path=row["path"],
                    occurrence=percent(row["occurrences"], nb_documents),
                )
            )
        fields[-1].types.append(
            TypeShare(
                type=row["type"],
                percentage=percent(row["count"], row["occurrences"]),
            )
        )
    return fields

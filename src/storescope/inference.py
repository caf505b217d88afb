"""Single-pass inference pipelines: sample, cluster or infer, aggregate."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import KeyHeuristics, ScanLimits
from .entities import DocumentSchemaResult, KeyPatternResult
from .scanner.aggregate import build_key_patterns, build_prefix_patterns, lookup_types
from .scanner.documents import infer_fields
from .scanner.keys import cluster_keys
from .scanner.prefix import cluster_prefixes
from .scanner.sampling import Sample, sample_items

Clock = Callable[[], float]


def _deadline(limits: ScanLimits, clock: Clock) -> float | None:
    return clock() + limits.timeout if limits.timeout is not None else None


def _sample(
    batches: Iterable[Iterable[Any]],
    limits: ScanLimits,
    deadline: float | None,
    clock: Clock,
) -> Sample[Any]:
    return sample_items(
        batches,
        max_items=limits.max_items,
        max_iterations=limits.max_iterations,
        deadline=deadline,
        clock=clock,
    )


def infer_key_patterns(
    batches: Iterable[Iterable[str]],
    *,
    limits: ScanLimits | None = None,
    heuristics: KeyHeuristics | None = None,
    key_type: Callable[[str], str] | None = None,
    workers: int = 1,
    clock: Clock = time.monotonic,
) -> KeyPatternResult:
    """Cluster a flat key space into patterns.

    ``batches`` is a cursor yielding lists of keys. ``key_type`` is the
    store's type oracle for one key; it is called at most once per distinct
    sampled key, optionally from ``workers`` threads. ``limits.timeout``
    bounds sampling and type lookups together: keys not looked up in time
    count as failed lookups and the result is marked truncated.
    """
    limits = limits or ScanLimits()
    deadline = _deadline(limits, clock)
    sample = _sample(batches, limits, deadline, clock)
    groups = cluster_keys(sample.items, heuristics)

    types: dict[str, str | None] | None = None
    failed = 0
    stop_reason = sample.stop_reason
    truncated = sample.truncated
    if key_type is not None:
        distinct = list(dict.fromkeys(sample.items))
        looked_up, skipped = lookup_types(
            distinct, key_type, workers=workers, deadline=deadline, clock=clock
        )
        types = dict(zip(distinct, looked_up))
        failed = sum(1 for key in sample.items if types[key] is None)
        if skipped:
            stop_reason = "timeout"
            truncated = True

    return KeyPatternResult(
        key_patterns=build_key_patterns(groups, types),
        total_items_scanned=len(sample.items),
        truncated=truncated,
        stop_reason=stop_reason,
        failed_lookups=failed,
    )


def infer_key_prefixes(
    batches: Iterable[Iterable[str]],
    *,
    limits: ScanLimits | None = None,
    clock: Clock = time.monotonic,
) -> KeyPatternResult:
    """Cluster a slash-delimited key space into hierarchical prefixes."""
    limits = limits or ScanLimits()
    sample = _sample(batches, limits, _deadline(limits, clock), clock)
    return KeyPatternResult(
        key_patterns=build_prefix_patterns(cluster_prefixes(sample.items)),
        total_items_scanned=len(sample.items),
        truncated=sample.truncated,
        stop_reason=sample.stop_reason,
    )


def infer_documents(
    batches: Iterable[Iterable[Mapping[str, Any]]],
    *,
    limits: ScanLimits | None = None,
    total_count: int | None = None,
    clock: Clock = time.monotonic,
) -> DocumentSchemaResult:
    """Infer the fields of a document collection from a bounded sample.

    ``total_count`` is the collection size reported by the store; it
    defaults to the sample size.
    """
    limits = limits or ScanLimits()
    sample = _sample(batches, limits, _deadline(limits, clock), clock)
    return DocumentSchemaResult(
        fields=infer_fields(sample.items),
        sample_size=len(sample.items),
        total_count=total_count if total_count is not None else len(sample.items),
        truncated=sample.truncated,
        stop_reason=sample.stop_reason,
    )

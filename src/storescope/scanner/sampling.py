"""Bounded sampling over store cursors."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")

# Stop reasons that mean the store was not fully read up to max_items
TRUNCATING_REASONS = frozenset({"max_iterations", "timeout"})


@dataclass(frozen=True)
class Sample(Generic[T]):
    """Items collected by one sampling pass.

    ``stop_reason`` is None when the cursor was exhausted, otherwise one of
    ``"max_items"``, ``"max_iterations"`` or ``"timeout"``. A cursor that ends
    on exactly its last allowed batch still reports ``"max_iterations"``:
    the cursor is never advanced past the cap to find out.
    """

    items: list[T] = field(default_factory=list)
    iterations: int = 0
    stop_reason: str | None = None

    @property
    def truncated(self) -> bool:
        """True if the pass stopped before exhaustion or max_items."""
        return self.stop_reason in TRUNCATING_REASONS


def sample_items(
    batches: Iterable[Iterable[T]],
    *,
    max_items: int,
    max_iterations: int,
    timeout: float | None = None,
    deadline: float | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> Sample[T]:
    """Pull batches from a cursor until a limit is reached.

    Each batch pulled counts as one cursor advance. The pass stops as soon as
    ``max_items`` items are collected, ``max_iterations`` batches were pulled,
    or ``timeout`` seconds elapsed, whichever comes first. Hitting a limit is
    not an error: the partial sample is returned with its ``stop_reason``.
    Exceptions raised by the cursor itself propagate.

    ``deadline`` is an absolute ``clock`` value shared with later stages of
    the same pass; it takes precedence over ``timeout``.
    """
    items: list[T] = []
    iterations = 0
    stop_reason: str | None = None
    if deadline is None and timeout is not None:
        deadline = clock() + timeout

    iterator = iter(batches)
    try:
        while True:
            if iterations >= max_iterations:
                stop_reason = "max_iterations"
                break
            if deadline is not None and clock() >= deadline:
                stop_reason = "timeout"
                break
            try:
                batch = next(iterator)
            except StopIteration:
                break
            iterations += 1
            items.extend(islice(batch, max_items - len(items)))
            if len(items) >= max_items:
                stop_reason = "max_items"
                break
    finally:
        # Release the store cursor when stopping early
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    return Sample(items=items, iterations=iterations, stop_reason=stop_reason)

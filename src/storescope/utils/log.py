"""Console progress logging."""

from __future__ import annotations

import sys
import time


def _elapsed(start_time: float | None) -> str:
    if start_time is None:
        return ""
    return f" ({time.perf_counter() - start_time:.1f}s)"


def _emit(line: str) -> None:
    print(line, file=sys.stderr, flush=True)


def log_start(msg: str, *, quiet: bool = False) -> None:
    """Log the start of a step."""
    if not quiet:
        _emit(f"  ⏳ {msg}...")


def log_done(msg: str, *, quiet: bool = False, start_time: float | None = None) -> None:
    """Log a completed step, with duration if start_time is given."""
    if not quiet:
        _emit(f"  ✓ {msg}{_elapsed(start_time)}")


def log_warn(msg: str, *, quiet: bool = False) -> None:
    """Log a non-fatal problem."""
    if not quiet:
        _emit(f"  ⚠ {msg}")


def log_section(method: str, target: str, *, quiet: bool = False) -> None:
    """Log the header of a catalog operation."""
    if not quiet:
        _emit(f"\n[{method}] {target}")


def log_store(name: str, *, quiet: bool = False) -> None:
    """Log the store being scanned."""
    if not quiet:
        _emit(f"  📦 {name}")


def log_summary(
    nb_patterns: int,
    nb_fields: int,
    *,
    quiet: bool = False,
    start_time: float | None = None,
) -> None:
    """Log the totals of a catalog operation."""
    if not quiet:
        _emit(f"  → {nb_patterns} key patterns, {nb_fields} fields{_elapsed(start_time)}")

"""Scan limits and key clustering heuristics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanLimits:
    """Bounds applied to every sampling pass."""

    max_items: int = 1000
    max_iterations: int = 10000
    timeout: float | None = None  # seconds, whole pass
    batch_size: int = 100  # cursor hint passed to the store

    def __post_init__(self) -> None:
        if self.max_items < 1:
            raise ValueError(f"max_items must be positive, got {self.max_items}")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")


@dataclass(frozen=True)
class KeyHeuristics:
    """Constants used to detect identifier tokens inside flat keys.

    Defaults were tuned empirically on real key-value namespaces such as
    ``user:1001``, ``session:5f2b9c``, ``cache_product_456`` or ``game1``.
    """

    separators: tuple[str, ...] = (":", "_", "-", ".")
    min_hex_length: int = 6
    min_alnum_length: int = 10
    min_suffix_token_length: int = 3
    min_hex_run: int = 8
    min_hex_key_run: int = 16
    fallback_prefix_length: int = 5
    fallback_min_key_length: int = 6

    def __post_init__(self) -> None:
        # Lists would make the instance unhashable for the pattern caches
        object.__setattr__(self, "separators", tuple(self.separators))
        for sep in self.separators:
            if not isinstance(sep, str) or not sep:
                raise ValueError(f"separators must be non-empty strings, got {sep!r}")
        for name in (
            "min_hex_length",
            "min_alnum_length",
            "min_suffix_token_length",
            "min_hex_run",
            "min_hex_key_run",
            "fallback_prefix_length",
            "fallback_min_key_length",
        ):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

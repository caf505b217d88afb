"""etcd reader: paginated range reads over a key prefix."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ._utils import decode_key

# Range end meaning "every key" when used with start b"\0"
_ALL_KEYS = b"\0"


def prefix_range_end(prefix: bytes) -> bytes:
    """Smallest key greater than every key starting with prefix."""
    end = bytearray(prefix)
    for i in reversed(range(len(end))):
        if end[i] < 0xFF:
            end[i] += 1
            return bytes(end[: i + 1])
    return _ALL_KEYS


def range_batches(
    client: Any,
    *,
    prefix: str = "",
    batch_size: int = 100,
) -> Iterator[list[str]]:
    """Yield keys under prefix in key order, one page per range request.

    ``client`` is an etcd3 client exposing ``get_range(start, end, **kw)``
    that returns ``(value, metadata)`` pairs with ``metadata.key`` in bytes.
    """
    start = prefix.encode("utf-8") if prefix else _ALL_KEYS
    end = prefix_range_end(start) if prefix else _ALL_KEYS

    while True:
        page = list(
            client.get_range(
                start,
                end,
                limit=batch_size,
                keys_only=True,
                sort_order="ascend",
                sort_target="key",
            )
        )
        keys = [meta.key for _, meta in page]
        if keys:
            yield [decode_key(k) for k in keys]
        if len(keys) < batch_size:
            return
        start = keys[-1] + b"\0"

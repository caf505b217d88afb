"""Redis reader: SCAN cursor, TYPE oracle and server metadata."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from ..scanner.types import MISSING, tag_value
from ._utils import decode_key

if TYPE_CHECKING:
    import redis


def scan_batches(
    client: redis.Redis,
    *,
    match: str = "*",
    count: int = 100,
) -> Iterator[list[str]]:
    """Yield one batch of keys per SCAN call until the cursor returns to 0."""
    cursor = 0
    while True:
        cursor, keys = client.scan(cursor=cursor, match=match, count=count)
        yield [decode_key(k) for k in keys]
        if int(cursor) == 0:
            return


def key_type_lookup(client: redis.Redis) -> Callable[[str], str]:
    """Return a function giving the native Redis type of one key.

    A key deleted since SCAN listed it answers TYPE with ``none`` and is
    tagged ``undefined``.
    """

    def _key_type(key: str) -> str:
        type_name = decode_key(client.type(key))
        return tag_value(MISSING) if type_name == "none" else type_name

    return _key_type


def count_keys(client: redis.Redis) -> int | None:
    """Number of keys in the selected database (DBSIZE)."""
    try:
        return int(client.dbsize())
    except Exception:
        return None


def get_version(client: redis.Redis) -> str | None:
    """Server version from INFO server, e.g. 'Redis 7.2.4'."""
    try:
        info = client.info("server")
    except Exception:
        return None
    version = info.get("redis_version")
    return f"Redis {version}" if version else None

"""Shared fixtures and fake store clients for storescope tests."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterator
from types import SimpleNamespace
from typing import Any

import pytest


class FakeRedis:
    """In-memory Redis exposing SCAN, TYPE, DBSIZE and INFO.

    ``data`` maps each key to its Redis type name. SCAN returns ``page``
    keys per call in insertion order, as bytes like the real driver.
    """

    def __init__(
        self,
        data: dict[str, str],
        *,
        page: int = 2,
        failing: set[str] | None = None,
    ) -> None:
        self.data = data
        self.keys = list(data)
        self.page = page
        self.failing = failing or set()
        self.scan_calls = 0
        self.type_calls = 0

    def scan(
        self, cursor: int = 0, match: str | None = None, count: int | None = None
    ) -> tuple[int, list[bytes]]:
        self.scan_calls += 1
        start = int(cursor)
        batch = self.keys[start : start + self.page]
        if match and match != "*":
            batch = fnmatch.filter(batch, match)
        next_cursor = start + self.page
        if next_cursor >= len(self.keys):
            next_cursor = 0
        return next_cursor, [k.encode() for k in batch]

    def type(self, key: str) -> bytes:
        self.type_calls += 1
        if key in self.failing:
            raise ConnectionError(f"lost connection while reading {key}")
        return self.data.get(key, "none").encode()

    def dbsize(self) -> int:
        return len(self.data)

    def info(self, section: str | None = None) -> dict[str, Any]:
        return {"redis_version": "7.2.4"}


class EndlessRedis(FakeRedis):
    """Redis whose SCAN cursor never returns to 0."""

    def __init__(self) -> None:
        super().__init__({})

    def scan(
        self, cursor: int = 0, match: str | None = None, count: int | None = None
    ) -> tuple[int, list[bytes]]:
        self.scan_calls += 1
        return int(cursor) + 1, []


class FakeEtcd:
    """etcd client answering ranged reads over a sorted key set."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = sorted(k.encode() for k in keys)
        self.requests: list[tuple[bytes, bytes, int | None]] = []

    def get_range(
        self,
        range_start: bytes,
        range_end: bytes,
        limit: int | None = None,
        keys_only: bool = False,
        sort_order: str | None = None,
        sort_target: str = "key",
    ) -> list[tuple[None, SimpleNamespace]]:
        self.requests.append((range_start, range_end, limit))
        selected = [
            k
            for k in self.keys
            if k >= range_start and (range_end == b"\0" or k < range_end)
        ]
        if limit:
            selected = selected[:limit]
        return [(None, SimpleNamespace(key=k)) for k in selected]


class FakeCursor:
    """Aggregation cursor over a list of documents."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._it: Iterator[dict[str, Any]] = iter(documents)
        self.closed = False

    def __iter__(self) -> FakeCursor:
        return self

    def __next__(self) -> dict[str, Any]:
        return next(self._it)

    def close(self) -> None:
        self.closed = True


class FakeCollection:
    """MongoDB collection returning the first documents for $sample."""

    def __init__(
        self,
        documents: list[dict[str, Any]],
        indexes: dict[str, Any] | None = None,
        *,
        broken: bool = False,
    ) -> None:
        self.documents = documents
        self.indexes = indexes or {"_id_": {"key": [("_id", 1)], "v": 2}}
        self.broken = broken
        self.pipelines: list[list[dict[str, Any]]] = []
        self.cursors: list[FakeCursor] = []

    def count_documents(self, query: dict[str, Any]) -> int:
        if self.broken:
            raise TimeoutError("server selection timed out")
        return len(self.documents)

    def aggregate(
        self, pipeline: list[dict[str, Any]], batchSize: int | None = None
    ) -> FakeCursor:
        self.pipelines.append(pipeline)
        size = pipeline[0]["$sample"]["size"]
        cursor = FakeCursor(self.documents[:size])
        self.cursors.append(cursor)
        return cursor

    def index_information(self) -> dict[str, Any]:
        return self.indexes


class FakeDatabase:
    """MongoDB database holding fake collections."""

    def __init__(self, name: str, collections: dict[str, FakeCollection]) -> None:
        self.name = name
        self.collections = collections
        self.client = SimpleNamespace(server_info=lambda: {"version": "7.0.5"})

    def list_collection_names(self) -> list[str]:
        return list(self.collections)

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections[name]


@pytest.fixture
def redis_client() -> FakeRedis:
    """Redis with three key families."""
    return FakeRedis(
        {
            "user:1": "hash",
            "user:2": "hash",
            "user:3": "string",
            "session:abc123def": "string",
            "config": "string",
        }
    )


@pytest.fixture
def etcd_client() -> FakeEtcd:
    """etcd with a small service registry."""
    return FakeEtcd(
        [
            "/services/api/1",
            "/services/api/2",
            "/services/web/1",
            "/config/app",
        ]
    )

"""MongoDB reader: collection listing, $sample cursor and index metadata."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import islice
from typing import TYPE_CHECKING, Any

from ._utils import filter_names

if TYPE_CHECKING:
    from pymongo.collection import Collection
    from pymongo.database import Database


def list_collections(
    database: Database,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> list[str]:
    """List collections, filtered by include/exclude patterns. System collections excluded."""
    names = [
        name
        for name in database.list_collection_names()
        if not name.startswith("system.")
    ]
    return filter_names(names, include, exclude)


def count_documents(collection: Collection) -> int:
    """Exact document count of a collection."""
    return int(collection.count_documents({}))


def sample_batches(
    collection: Collection,
    *,
    size: int,
    batch_size: int = 100,
) -> Iterator[list[dict[str, Any]]]:
    """Yield documents picked by a $sample stage, batch_size at a time."""
    if size <= 0:
        return
    cursor = collection.aggregate([{"$sample": {"size": size}}], batchSize=batch_size)
    try:
        while True:
            batch = list(islice(cursor, batch_size))
            if not batch:
                return
            yield batch
    finally:
        cursor.close()


def list_indexes(collection: Collection) -> list[dict[str, Any]]:
    """Index name, keys and uniqueness, sorted by name."""
    indexes = []
    for name, info in sorted(collection.index_information().items()):
        indexes.append(
            {
                "name": name,
                "keys": {field: direction for field, direction in info["key"]},
                "unique": bool(info.get("unique", False)),
            }
        )
    return indexes


def get_version(database: Database) -> str | None:
    """Server version, e.g. 'MongoDB 7.0.5'."""
    try:
        version = database.client.server_info().get("version")
    except Exception:
        return None
    return f"MongoDB {version}" if version else None

"""Catalog of inferred store schemas."""

from __future__ import annotations

import time
import warnings
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ._ids import make_id, sanitize_id
from .config import KeyHeuristics, ScanLimits
from .entities import (
    Collection,
    DocumentSchemaResult,
    FieldInfo,
    KeyPattern,
    KeyPatternResult,
    Store,
)
from .inference import infer_documents, infer_key_patterns, infer_key_prefixes
from .readers import etcd as etcd_reader
from .readers import mongodb as mongodb_reader
from .readers import redis as redis_reader
from .readers._utils import get_now_iso
from .utils.log import (
    log_done,
    log_section,
    log_start,
    log_store,
    log_summary,
    log_warn,
)
from .writers.json import write_catalog


@dataclass
class Catalog:
    """A catalog of key patterns and document fields inferred from live stores."""

    stores: list[Store] = field(default_factory=list)
    key_patterns: list[KeyPattern] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)
    fields: list[FieldInfo] = field(default_factory=list)
    limits: ScanLimits = field(default_factory=ScanLimits)
    heuristics: KeyHeuristics = field(default_factory=KeyHeuristics)
    quiet: bool = False

    def _register_store(
        self, store: Store | None, default_name: str, store_type: str
    ) -> Store:
        """Add the store (or a default one) to the catalog."""
        if store is None:
            store = Store(id=sanitize_id(default_name), name=default_name)
        store.type = store.type or store_type
        store.last_update_date = get_now_iso()
        self.stores.append(store)
        return store

    def _record_key_result(
        self, store: Store, result: KeyPatternResult, *, quiet: bool
    ) -> None:
        """Attach key patterns to the store and report non-fatal problems."""
        self.key_patterns.extend(
            replace(pattern, store_id=store.id) for pattern in result.key_patterns
        )
        if store.total_keys is None:
            store.total_keys = result.total_items_scanned
        if result.truncated:
            log_warn(
                f"{store.name}: scan stopped early ({result.stop_reason}) "
                f"after {result.total_items_scanned} keys",
                quiet=quiet,
            )
        if result.failed_lookups:
            log_warn(
                f"{store.name}: type lookup failed for "
                f"{result.failed_lookups} keys",
                quiet=quiet,
            )

    def _record_collection(
        self,
        store: Store,
        name: str,
        result: DocumentSchemaResult,
        indexes: list[dict[str, Any]] | None = None,
    ) -> Collection:
        collection = Collection(
            id=make_id(store.id, sanitize_id(name)),
            name=name,
            store_id=store.id,
            nb_document=result.total_count,
            sample_size=result.sample_size,
            truncated=result.truncated,
            indexes=indexes or [],
        )
        self.collections.append(collection)
        self.fields.extend(
            replace(f, collection_id=collection.id) for f in result.fields
        )
        return collection

    def add_keys(
        self,
        keys: Iterable[str],
        store: Store | None = None,
        *,
        hierarchical: bool = False,
        key_type: Callable[[str], str] | None = None,
        workers: int = 1,
        limits: ScanLimits | None = None,
        quiet: bool | None = None,
    ) -> KeyPatternResult:
        """Cluster an arbitrary key listing and add its patterns to the catalog.

        With ``hierarchical=True`` keys are treated as slash-delimited paths
        and grouped by prefix; otherwise they are grouped by separator and
        identifier suffix, with ``key_type`` giving each key's value type.
        """
        if hierarchical and key_type is not None:
            raise ValueError("key_type is not supported with hierarchical=True")

        q = self.quiet if quiet is None else quiet
        start_time = time.perf_counter()
        store = self._register_store(store, "keys", "keys")
        log_section("add_keys", store.name or store.id, quiet=q)

        if hierarchical:
            result = infer_key_prefixes([keys], limits=limits or self.limits)
        else:
            result = infer_key_patterns(
                [keys],
                limits=limits or self.limits,
                heuristics=self.heuristics,
                key_type=key_type,
                workers=workers,
            )
        self._record_key_result(store, result, quiet=q)
        log_summary(len(result.key_patterns), 0, quiet=q, start_time=start_time)
        return result

    def add_redis(
        self,
        client: Any,
        store: Store | None = None,
        *,
        match: str = "*",
        workers: int = 1,
        limits: ScanLimits | None = None,
        quiet: bool | None = None,
    ) -> KeyPatternResult:
        """Scan a Redis database and add its key patterns to the catalog."""
        q = self.quiet if quiet is None else quiet
        limits = limits or self.limits
        start_time = time.perf_counter()
        store = self._register_store(store, "redis", "redis")
        log_section("add_redis", store.name or store.id, quiet=q)

        store.version = redis_reader.get_version(client)
        store.total_keys = redis_reader.count_keys(client)

        log_start(f"Scanning keys matching {match!r}", quiet=q)
        result = infer_key_patterns(
            redis_reader.scan_batches(client, match=match, count=limits.batch_size),
            limits=limits,
            heuristics=self.heuristics,
            key_type=redis_reader.key_type_lookup(client),
            workers=workers,
        )
        log_done(f"{result.total_items_scanned} keys scanned", quiet=q)

        self._record_key_result(store, result, quiet=q)
        log_summary(len(result.key_patterns), 0, quiet=q, start_time=start_time)
        return result

    def add_etcd(
        self,
        client: Any,
        store: Store | None = None,
        *,
        prefix: str = "",
        limits: ScanLimits | None = None,
        quiet: bool | None = None,
    ) -> KeyPatternResult:
        """Scan an etcd key space and add its prefix hierarchy to the catalog."""
        q = self.quiet if quiet is None else quiet
        limits = limits or self.limits
        start_time = time.perf_counter()
        store = self._register_store(store, "etcd", "etcd")
        store.data_path = prefix or None
        log_section("add_etcd", store.name or store.id, quiet=q)

        log_start(f"Reading keys under {prefix or '/'!r}", quiet=q)
        result = infer_key_prefixes(
            etcd_reader.range_batches(
                client, prefix=prefix, batch_size=limits.batch_size
            ),
            limits=limits,
        )
        log_done(f"{result.total_items_scanned} keys scanned", quiet=q)

        self._record_key_result(store, result, quiet=q)
        log_summary(len(result.key_patterns), 0, quiet=q, start_time=start_time)
        return result

    def add_documents(
        self,
        documents: Iterable[Mapping[str, Any]],
        name: str,
        store: Store | None = None,
        *,
        total_count: int | None = None,
        limits: ScanLimits | None = None,
        quiet: bool | None = None,
    ) -> DocumentSchemaResult:
        """Infer the fields of an arbitrary document listing."""
        q = self.quiet if quiet is None else quiet
        start_time = time.perf_counter()
        if store is None or store not in self.stores:
            store = self._register_store(store, "documents", "documents")
        log_section("add_documents", name, quiet=q)

        result = infer_documents(
            [documents], limits=limits or self.limits, total_count=total_count
        )
        self._record_collection(store, name, result)
        log_summary(0, len(result.fields), quiet=q, start_time=start_time)
        return result

    def add_mongodb(
        self,
        database: Any,
        store: Store | None = None,
        *,
        include: Sequence[str] | None = None,
        exclude: Sequence[str] | None = None,
        limits: ScanLimits | None = None,
        quiet: bool | None = None,
    ) -> list[Collection]:
        """Sample every collection of a MongoDB database and infer its fields."""
        q = self.quiet if quiet is None else quiet
        limits = limits or self.limits
        start_time = time.perf_counter()
        store = self._register_store(store, database.name, "mongodb")
        log_section("add_mongodb", store.name or store.id, quiet=q)

        store.version = mongodb_reader.get_version(database)
        added: list[Collection] = []
        nb_fields = 0

        for name in mongodb_reader.list_collections(database, include, exclude):
            log_store(name, quiet=q)
            collection = database[name]
            try:
                total = mongodb_reader.count_documents(collection)
                result = infer_documents(
                    mongodb_reader.sample_batches(
                        collection,
                        size=min(limits.max_items, total),
                        batch_size=limits.batch_size,
                    ),
                    limits=limits,
                    total_count=total,
                )
                indexes = mongodb_reader.list_indexes(collection)
            except Exception as e:
                warnings.warn(
                    f"Could not sample collection {name!r}: {e}", stacklevel=2
                )
                result = DocumentSchemaResult()
                indexes = []
            if result.truncated:
                log_warn(
                    f"{name}: sampling stopped early ({result.stop_reason})",
                    quiet=q,
                )
            added.append(self._record_collection(store, name, result, indexes))
            nb_fields += len(result.fields)

        log_summary(0, nb_fields, quiet=q, start_time=start_time)
        return added

    def add_store(
        self, store_type: str, client: Any, store: Store | None = None, **kwargs: Any
    ) -> Any:
        """Dispatch to the add_* method for a store type ('redis', 'etcd', 'mongodb')."""
        method_name = STORE_METHODS.get(store_type.lower())
        if method_name is None:
            supported = ", ".join(sorted(STORE_METHODS))
            raise ValueError(
                f"Unsupported store type: {store_type!r}. Supported: {supported}"
            )
        return getattr(self, method_name)(client, store, **kwargs)

    def write(self, output_dir: str | Path) -> None:
        """Export catalog to JSON files."""
        write_catalog(
            output_dir,
            stores=self.stores,
            key_patterns=self.key_patterns,
            collections=self.collections,
            fields=self.fields,
        )

    def __len__(self) -> int:
        """Return number of stores."""
        return len(self.stores)

    def __repr__(self) -> str:
        return (
            f"Catalog(stores={len(self.stores)}, "
            f"key_patterns={len(self.key_patterns)}, "
            f"collections={len(self.collections)}, "
            f"fields={len(self.fields)})"
        )


# Store type -> Catalog method, resolved once at import
STORE_METHODS: dict[str, str] = {
    "redis": "add_redis",
    "etcd": "add_etcd",
    "mongodb": "add_mongodb",
    "mongo": "add_mongodb",
}

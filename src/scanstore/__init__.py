"""scanstore — typed object storage over an ordered key-value store.

Convenience API:
    scanstore.open_storage("sqlite://./data")  -> OrderedStorage on disk
    scanstore.open_storage("memory")           -> OrderedStorage in memory

DI API (construct your own storage):
    from scanstore.storage import OrderedStorage
    storage = OrderedStorage(config=StorageConfig(dir="./data"))
    await storage.save(event)
    page = await storage.list(Event, StorageListOptions(limit=50, order_by="time"))
"""

from __future__ import annotations

from pathlib import Path

from .config import StorageConfig
from .exceptions import (
    DecodeError,
    NotFoundError,
    ScanstoreError,
    StoreIOError,
    UnexpectedStreamTermination,
    UnsupportedOperationError,
)
from .kv import OrderedKeyValueStore
from .models import ListResponse, Record, Storable, StorageListOptions, StorageQuery, parse_query
from .query import matches
from .storage import ListFacade, OrderedStorage, Storage


def open_storage(target: str | Path | StorageConfig | OrderedKeyValueStore = "memory") -> OrderedStorage:
    """Build an ``OrderedStorage`` from a target description.

    Accepts ``"memory"``, ``"sqlite://<dir>"``, a directory path, a
    ``StorageConfig``, or an already-open ordered key-value store.
    """
    if isinstance(target, StorageConfig):
        return OrderedStorage(config=target)
    if isinstance(target, Path):
        return OrderedStorage(config=StorageConfig(dir=target))
    if isinstance(target, str):
        if target == "memory":
            return OrderedStorage(config=StorageConfig(backend="memory"))
        if target.startswith("sqlite://"):
            return OrderedStorage(config=StorageConfig(dir=Path(target.removeprefix("sqlite://"))))
        raise ValueError(
            "Unsupported storage value. Use 'memory', 'sqlite://<dir>', a Path, "
            "a StorageConfig, or an OrderedKeyValueStore instance."
        )
    if isinstance(target, OrderedKeyValueStore):
        return OrderedStorage(store=target)
    raise ValueError(f"Unsupported storage target: {target!r}")


__all__ = [
    "DecodeError",
    "ListFacade",
    "ListResponse",
    "NotFoundError",
    "OrderedKeyValueStore",
    "OrderedStorage",
    "Record",
    "ScanstoreError",
    "Storable",
    "Storage",
    "StorageConfig",
    "StorageListOptions",
    "StorageQuery",
    "StoreIOError",
    "UnexpectedStreamTermination",
    "UnsupportedOperationError",
    "matches",
    "open_storage",
    "parse_query",
]

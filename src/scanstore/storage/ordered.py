"""Object storage on top of an ordered key-value store."""

from __future__ import annotations

import logging
from contextlib import aclosing
from types import TracebackType
from typing import TypeVar

from ..config import StorageConfig
from ..exceptions import DecodeError, NotFoundError, UnsupportedOperationError
from ..kv import MemoryKeyValueStore, OrderedKeyValueStore, SQLiteKeyValueStore
from ..models import ListResponse, Storable, StorageListOptions, StorageQuery
from ..query import matches, sort_by

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Storable)


class OrderedStorage:
    """Maps storables to ``kind + separator + id`` keys of an ordered store.

    Point operations touch a single key. ``list`` and ``count`` scan the
    whole store and keep the keys under the requested kind's prefix, so
    their cost grows with the size of the store, not of the result.

    Error-handling contract
    -----------------------
    - ``get`` raises ``NotFoundError`` for an absent key and lets
      ``DecodeError`` propagate for an unreadable one.
    - During a scan, entries that fail to decode are logged and skipped.
    - ``StoreIOError`` (including ``UnexpectedStreamTermination``) from the
      store fails the whole call; nothing is retried.
    """

    def __init__(
        self,
        config: StorageConfig | None = None,
        store: OrderedKeyValueStore | None = None,
    ) -> None:
        self.config = config or StorageConfig()
        self.store: OrderedKeyValueStore = store if store is not None else _open_store(self.config)

    def key(self, kind: str, id: str) -> str:
        return self.prefix(kind) + id

    def prefix(self, kind: str) -> str:
        if not kind:
            raise ValueError("Storable kind must not be empty")
        if self.config.separator in kind:
            raise ValueError(f"Storable kind {kind!r} must not contain {self.config.separator!r}")
        return kind + self.config.separator

    async def get(self, cls: type[S] | S, id: str) -> S:
        model = cls if isinstance(cls, type) else type(cls)
        raw = await self.store.get(self.key(model.kind, id))
        if raw is None:
            raise NotFoundError(model.kind, id)
        return model.from_json(raw)

    async def save(self, obj: Storable) -> None:
        await self.store.put(self.key(obj.kind, obj.id), obj.to_json())

    async def delete(self, obj: Storable) -> None:
        # Deleting an absent key is a no-op so list-then-delete callers can
        # race with each other.
        await self.store.delete(self.key(obj.kind, obj.id))

    async def clear(self) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support clear()")

    async def list(self, cls: type[S], options: StorageListOptions | None = None) -> ListResponse[S]:
        options = options or StorageListOptions()
        prefix = self.prefix(cls.kind)
        results: list[tuple[dict[str, object], S]] = []

        async with aclosing(self.store.scan()) as stream:
            async for key, value in stream:
                if not key.startswith(prefix):
                    continue
                try:
                    item = cls.from_json(value)
                except DecodeError as exc:
                    logger.error("Failed to load %s: %s", key, exc)
                    continue
                document = item.to_document()
                if options.query is None or matches(document, options.query):
                    results.append((document, item))

        if options.order_by:
            results = sort_by(
                results,
                options.order_by,
                options.order_by_direction,
                document=lambda entry: entry[0],
            )

        page = results[options.offset : options.end]
        return ListResponse(
            items=[item for _, item in page],
            offset=options.offset,
            total=len(results),
        )

    async def count(self, cls: type[S], query: StorageQuery | None = None) -> int:
        response = await self.list(cls, StorageListOptions(query=query))
        return len(response.items)

    async def close(self) -> None:
        await self.store.close()

    async def __aenter__(self) -> OrderedStorage:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


def _open_store(config: StorageConfig) -> OrderedKeyValueStore:
    if config.backend == "memory":
        return MemoryKeyValueStore()
    return SQLiteKeyValueStore(config.path, batch_size=config.scan_batch_size)

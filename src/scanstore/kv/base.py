"""Ordered key-value store abstraction."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Protocol, runtime_checkable


@runtime_checkable
class OrderedKeyValueStore(Protocol):
    """Protocol for the durable substrate objects are persisted in.

    ``scan`` yields every ``(key, value)`` pair in ascending lexicographic
    key order. Normal exhaustion of the generator is the end signal; a store
    that loses its cursor before the end raises ``UnexpectedStreamTermination``
    and I/O failures raise ``StoreIOError``. Closing the generator early must
    release the cursor.
    """

    async def get(self, key: str) -> str | None: ...
    async def put(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> None: ...
    def scan(self) -> AsyncGenerator[tuple[str, str], None]: ...
    async def close(self) -> None: ...

"""In-memory ordered key-value store."""

from __future__ import annotations

import asyncio
import bisect
from collections.abc import AsyncGenerator

from ..exceptions import StoreIOError, UnexpectedStreamTermination


class MemoryKeyValueStore:
    """In-memory store kept in key order. Good for tests and short-lived scripts."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._keys: list[str] = []
        self._closed = False

    async def get(self, key: str) -> str | None:
        self._check_open()
        return self._values.get(key)

    async def put(self, key: str, value: str) -> None:
        self._check_open()
        if key not in self._values:
            bisect.insort(self._keys, key)
        self._values[key] = value

    async def delete(self, key: str) -> None:
        self._check_open()
        if self._values.pop(key, None) is None:
            return
        del self._keys[bisect.bisect_left(self._keys, key)]

    async def scan(self) -> AsyncGenerator[tuple[str, str], None]:
        self._check_open()
        # Iterate a snapshot of the key list; values are read live so a key
        # deleted mid-scan is skipped.
        for key in list(self._keys):
            await asyncio.sleep(0)
            if self._closed:
                raise UnexpectedStreamTermination("Memory store closed during scan")
            value = self._values.get(key)
            if value is None:
                continue
            yield key, value

    async def close(self) -> None:
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise StoreIOError("Memory store is closed")

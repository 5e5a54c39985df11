"""SQLite-backed ordered key-value store."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
import threading
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

from ..exceptions import StoreIOError, UnexpectedStreamTermination

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
) WITHOUT ROWID
"""


class SQLiteKeyValueStore:
    """Single-file store with one row per key.

    Keys use SQLite's default BINARY collation, which orders UTF-8 text by
    code point, matching Python string ordering. Every write commits before
    returning. Blocking calls run in a worker thread and share one
    connection guarded by a lock.

    Scans page through the table in key order, ``batch_size`` rows per
    round trip, resuming after the last key seen. Writes that land between
    pages may or may not be observed by the scan.
    """

    def __init__(self, path: str | Path, *, batch_size: int = 256) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.path = Path(path)
        self.batch_size = batch_size
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._conn: sqlite3.Connection | None = sqlite3.connect(
                self.path,
                check_same_thread=False,
                isolation_level=None,
            )
            self._conn.execute(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise StoreIOError(f"Cannot open store at {self.path}: {exc}") from exc
        logger.debug("Opened SQLite store at %s", self.path)

    async def get(self, key: str) -> str | None:
        rows = await asyncio.to_thread(self._execute, "SELECT value FROM entries WHERE key = ?", (key,))
        return rows[0][0] if rows else None

    async def put(self, key: str, value: str) -> None:
        await asyncio.to_thread(
            self._execute,
            "INSERT INTO entries (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._execute, "DELETE FROM entries WHERE key = ?", (key,))

    async def scan(self) -> AsyncGenerator[tuple[str, str], None]:
        after: str | None = None
        while True:
            rows = await asyncio.to_thread(self._fetch_page, after)
            for key, value in rows:
                yield key, value
            if len(rows) < self.batch_size:
                return
            after = rows[-1][0]

    async def close(self) -> None:
        if await asyncio.to_thread(self._close):
            logger.debug("Closed SQLite store at %s", self.path)

    def _close(self) -> bool:
        with self._lock:
            if self._conn is None:
                return False
            self._conn.close()
            self._conn = None
            return True

    def _fetch_page(self, after: str | None) -> list[tuple[str, str]]:
        if after is None:
            return self._execute(
                "SELECT key, value FROM entries ORDER BY key LIMIT ?",
                (self.batch_size,),
            )
        return self._execute(
            "SELECT key, value FROM entries WHERE key > ? ORDER BY key LIMIT ?",
            (after, self.batch_size),
            closed_error=UnexpectedStreamTermination,
        )

    def _execute(
        self,
        sql: str,
        params: tuple[Any, ...],
        *,
        closed_error: type[StoreIOError] = StoreIOError,
    ) -> list[Any]:
        with self._lock:
            if self._conn is None:
                raise closed_error(f"Store at {self.path} is closed")
            try:
                return self._conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                raise StoreIOError(f"SQLite error on {self.path}: {exc}") from exc

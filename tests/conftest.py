from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import ClassVar

import pytest
import pytest_asyncio

from scanstore import StorageConfig, Storable
from scanstore.storage import OrderedStorage


class Event(Storable):
    kind: ClassVar[str] = "event"

    time: str
    action: str = "update"
    context: dict[str, object] = {}


class Note(Storable):
    kind: ClassVar[str] = "note"

    title: str
    priority: int = 0
    tags: list[str] = []


@pytest.fixture
def memory_storage() -> OrderedStorage:
    return OrderedStorage(config=StorageConfig(backend="memory"))


@pytest_asyncio.fixture
async def sqlite_storage(tmp_path: Path) -> AsyncIterator[OrderedStorage]:
    storage = OrderedStorage(config=StorageConfig(dir=tmp_path / "data", scan_batch_size=2))
    yield storage
    await storage.close()


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def storage(request: pytest.FixtureRequest, tmp_path: Path) -> AsyncIterator[OrderedStorage]:
    """Run a test against both ordered key-value stores."""
    if request.param == "memory":
        yield OrderedStorage(config=StorageConfig(backend="memory"))
        return
    storage = OrderedStorage(config=StorageConfig(dir=tmp_path / "data", scan_batch_size=2))
    yield storage
    await storage.close()

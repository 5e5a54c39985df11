"""Storage backend abstractions."""

from __future__ import annotations

from typing import Protocol, TypeVar

from ..models import ListResponse, Storable, StorageListOptions, StorageQuery

S = TypeVar("S", bound=Storable)


class Storage(Protocol):
    """Protocol every object storage backend satisfies."""

    async def get(self, cls: type[S] | S, id: str) -> S: ...
    async def save(self, obj: Storable) -> None: ...
    async def delete(self, obj: Storable) -> None: ...
    async def clear(self) -> None: ...
    async def list(self, cls: type[S], options: StorageListOptions | None = None) -> ListResponse[S]: ...
    async def count(self, cls: type[S], query: StorageQuery | None = None) -> int: ...

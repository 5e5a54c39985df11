"""Read-only list/count entry point over any storage backend."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from ..models import ListResponse, Storable, StorageListOptions, StorageQuery, parse_query
from .base import Storage

S = TypeVar("S", bound=Storable)


class ListFacade:
    """Normalizes caller parameters and delegates to ``storage.list``/``count``.

    Holds no state beyond the wrapped storage. Queries may be given as
    model trees or as plain mappings such as decoded request JSON.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    async def list(
        self,
        cls: type[S],
        options: StorageListOptions | None = None,
        *,
        offset: int | None = None,
        limit: int | None = None,
        query: StorageQuery | Mapping[str, Any] | None = None,
        order_by: str | None = None,
        order_by_direction: str | None = None,
    ) -> ListResponse[S]:
        """List ``cls`` objects, from ``options`` or from keyword parameters.

        Raises ``TypeError`` when both are given.
        """
        keywords = (offset, limit, query, order_by, order_by_direction)
        if options is not None:
            if any(value is not None for value in keywords):
                raise TypeError("Pass either options or keyword parameters, not both")
        else:
            options = StorageListOptions(
                offset=offset or 0,
                limit=limit,
                query=query,
                order_by=order_by or None,
                order_by_direction=order_by_direction,
            )
        return await self._storage.list(cls, options)

    async def count(
        self,
        cls: type[S],
        query: StorageQuery | Mapping[str, Any] | None = None,
    ) -> int:
        return await self._storage.count(cls, parse_query(query) if query is not None else None)

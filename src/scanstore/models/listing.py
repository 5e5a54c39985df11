"""List options and paginated responses."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .query import StorageQuery, parse_query

T = TypeVar("T")

OrderDirection = Literal["asc", "desc"]


class StorageListOptions(BaseModel):
    """Window, filter and ordering for a ``list`` call.

    ``limit=None`` means unbounded. ``order_by`` is a dotted path like the
    ones used in queries.
    """

    model_config = ConfigDict(extra="forbid")

    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=0)
    query: StorageQuery | None = None
    order_by: str | None = None
    order_by_direction: OrderDirection = "asc"

    @field_validator("query", mode="before")
    @classmethod
    def _parse_query(cls, value: Any) -> Any:
        if value is None:
            return None
        return parse_query(value)

    @field_validator("order_by_direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> Any:
        if value is None:
            return "asc"
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def end(self) -> int | None:
        if self.limit is None:
            return None
        return self.offset + self.limit


class ListResponse(BaseModel, Generic[T]):
    """One page of results. ``total`` counts every match before slicing."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    offset: int = 0
    total: int = 0

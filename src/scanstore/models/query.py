"""Query models: the recursive predicate tree used by ``list`` and ``count``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

ComparisonOp = Literal["eq", "ne", "gt", "gte", "lt", "lte", "regex"]


class QueryLeaf(BaseModel):
    """Compare the value at ``path`` with ``value``."""

    model_config = ConfigDict(extra="forbid")

    path: str
    op: ComparisonOp = "eq"
    value: Any = None


class QueryGroup(BaseModel):
    """``and``/``or`` over sub-queries. ``and([])`` is true, ``or([])`` is false."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["and", "or"]
    queries: list[StorageQuery] = Field(default_factory=list)


class QueryNot(BaseModel):
    """Negation of a single sub-query."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["not"]
    query: StorageQuery


StorageQuery = QueryLeaf | QueryGroup | QueryNot

QueryGroup.model_rebuild()
QueryNot.model_rebuild()

_query_adapter: TypeAdapter[StorageQuery] = TypeAdapter(StorageQuery)


def parse_query(query: StorageQuery | Mapping[str, Any]) -> StorageQuery:
    """Validate a plain mapping (e.g. decoded request JSON) into a query tree.

    Already-built query models are returned unchanged. Raises pydantic's
    ``ValidationError`` for malformed trees.
    """
    if isinstance(query, QueryLeaf | QueryGroup | QueryNot):
        return query
    return _query_adapter.validate_python(dict(query))


def and_(*queries: StorageQuery) -> QueryGroup:
    return QueryGroup(op="and", queries=list(queries))


def or_(*queries: StorageQuery) -> QueryGroup:
    return QueryGroup(op="or", queries=list(queries))


def not_(query: StorageQuery) -> QueryNot:
    return QueryNot(op="not", query=query)

"""Data models for stored objects, queries and listings."""

from .listing import ListResponse, OrderDirection, StorageListOptions
from .query import (
    ComparisonOp,
    QueryGroup,
    QueryLeaf,
    QueryNot,
    StorageQuery,
    and_,
    not_,
    or_,
    parse_query,
)
from .storable import Record, Storable, record_type

__all__ = [
    "ComparisonOp",
    "ListResponse",
    "OrderDirection",
    "QueryGroup",
    "QueryLeaf",
    "QueryNot",
    "Record",
    "Storable",
    "StorageListOptions",
    "StorageQuery",
    "and_",
    "not_",
    "or_",
    "parse_query",
    "record_type",
]

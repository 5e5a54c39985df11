"""Predicate evaluation over decoded documents.

``matches`` never raises: a path that cannot be resolved, or a comparison
between values of different type families, makes the leaf false. This
holds for every operator, ``ne`` included, so that ``ne`` only selects
objects that actually carry a comparable value at ``path``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any, Final

from pydantic import BaseModel

from ..models import QueryGroup, QueryLeaf, QueryNot, StorageQuery


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

_ORDERED_FAMILIES = frozenset({"bool", "number", "string"})


def as_document(obj: object) -> object:
    """Return the traversable tree for ``obj``; pydantic models are dumped in JSON mode."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    return obj


def resolve_path(document: object, path: str) -> object:
    """Follow a dotted ``path`` through nested mappings and sequences.

    Numeric segments index into sequences. An empty path resolves to the
    document itself. Returns ``MISSING`` when any segment cannot be followed.
    """
    current = document
    if not path:
        return current
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif _is_sequence(current) and _is_index(segment):
            index = int(segment)
            if index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current


def type_family(value: object) -> str | None:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if _is_sequence(value):
        return "sequence"
    return None


def matches(document: object, query: StorageQuery) -> bool:
    """Evaluate ``query`` against ``document``. Combinators short-circuit."""
    return _evaluate(as_document(document), query)


def _evaluate(document: object, query: StorageQuery) -> bool:
    if isinstance(query, QueryGroup):
        if query.op == "or":
            return any(_evaluate(document, sub) for sub in query.queries)
        return all(_evaluate(document, sub) for sub in query.queries)
    if isinstance(query, QueryNot):
        return not _evaluate(document, query.query)
    if isinstance(query, QueryLeaf):
        return _match_leaf(resolve_path(document, query.path), query)
    return False


def _match_leaf(actual: object, leaf: QueryLeaf) -> bool:
    if actual is MISSING:
        return False
    expected = leaf.value

    if leaf.op == "regex":
        return _match_regex(actual, expected)

    if isinstance(expected, datetime):
        actual = _parse_datetime(actual)
        if not isinstance(actual, datetime):
            return False
        # naive vs aware: ordering raises TypeError but != is True
        if (actual.tzinfo is None) != (expected.tzinfo is None):
            return False
        return _compare(actual, expected, leaf.op)
    if isinstance(expected, date):
        expected = expected.isoformat()

    family = type_family(actual)
    if family is None or family != type_family(expected):
        return False
    if leaf.op in ("eq", "ne"):
        return _compare(actual, expected, leaf.op)
    if family not in _ORDERED_FAMILIES:
        return False
    return _compare(actual, expected, leaf.op)


def _compare(actual: Any, expected: Any, op: str) -> bool:
    try:
        if op == "eq":
            return bool(actual == expected)
        if op == "ne":
            return bool(actual != expected)
        if op == "gt":
            return bool(actual > expected)
        if op == "gte":
            return bool(actual >= expected)
        if op == "lt":
            return bool(actual < expected)
        if op == "lte":
            return bool(actual <= expected)
    except TypeError:
        # incomparable values
        return False
    return False


def _match_regex(actual: object, pattern: object) -> bool:
    if not isinstance(actual, str) or not isinstance(pattern, str):
        return False
    try:
        return re.search(pattern, actual) is not None
    except re.error:
        return False


def _parse_datetime(value: object) -> datetime | _Missing:
    if not isinstance(value, str):
        return MISSING
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return MISSING


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _is_index(segment: str) -> bool:
    return segment.isdecimal()

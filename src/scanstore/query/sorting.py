"""Stable ordering of decoded documents by a dotted field path."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ..models import OrderDirection
from .engine import MISSING, resolve_path, type_family

E = TypeVar("E")

# Rank of each type family when a collection mixes them. Missing sorts first
# ascending and therefore last descending.
_FAMILY_RANK = {"null": 1, "bool": 2, "number": 3, "string": 4, "mapping": 5, "sequence": 5}


def sort_key(path: str) -> Callable[[object], tuple[int, Any]]:
    """Return a key function ordering documents by the value at ``path``."""

    def key(document: object) -> tuple[int, Any]:
        value = resolve_path(document, path)
        if value is MISSING:
            return (0, 0)
        family = type_family(value)
        rank = _FAMILY_RANK.get(family or "", 6)
        if family in ("bool", "number", "string"):
            return (rank, value)
        return (rank, 0)

    return key


def sort_by(
    entries: Iterable[E],
    path: str,
    direction: OrderDirection = "asc",
    *,
    document: Callable[[E], object] = lambda entry: entry,
) -> list[E]:
    """Sort ``entries`` by ``path``, keeping input order among equal keys.

    ``document`` extracts the traversable tree from each entry, for callers
    that sort ``(document, object)`` pairs.
    """
    key = sort_key(path)
    return sorted(entries, key=lambda entry: key(document(entry)), reverse=direction == "desc")

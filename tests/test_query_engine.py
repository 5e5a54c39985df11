from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import UTC, date, datetime

import pytest

from scanstore.models import QueryGroup, QueryLeaf, and_, not_, or_, parse_query
from scanstore.query import MISSING, matches, resolve_path

from conftest import Event

DOC: dict[str, object] = {
    "id": "e1",
    "time": "2024-02-01T10:00:00Z",
    "count": 3,
    "ratio": 0.5,
    "enabled": True,
    "note": None,
    "context": {"account": {"email": "a@example.com"}, "tags": ["x", "y"]},
}


def test_resolve_path_nested_mapping() -> None:
    assert resolve_path(DOC, "context.account.email") == "a@example.com"


def test_resolve_path_sequence_index() -> None:
    assert resolve_path(DOC, "context.tags.1") == "y"
    assert resolve_path(DOC, "context.tags.5") is MISSING


def test_resolve_path_missing_intermediate_key() -> None:
    assert resolve_path(DOC, "context.device.platform") is MISSING
    assert resolve_path(DOC, "count.value") is MISSING


def test_resolve_path_empty_returns_document() -> None:
    assert resolve_path(DOC, "") is DOC


def test_resolve_path_present_null_is_not_missing() -> None:
    assert resolve_path(DOC, "note") is None


@pytest.mark.parametrize(
    ("op", "value", "expected"),
    [
        ("eq", 3, True),
        ("ne", 3, False),
        ("ne", 4, True),
        ("gt", 2, True),
        ("gt", 3, False),
        ("gte", 3, True),
        ("lt", 3, False),
        ("lte", 3, True),
        ("lt", 3.5, True),
    ],
)
def test_numeric_comparisons(op: str, value: object, expected: bool) -> None:
    assert matches(DOC, QueryLeaf(path="count", op=op, value=value)) is expected  # type: ignore[arg-type]


def test_default_op_is_eq() -> None:
    leaf = parse_query({"path": "context.account.email", "value": "a@example.com"})
    assert isinstance(leaf, QueryLeaf)
    assert leaf.op == "eq"
    assert matches(DOC, leaf)


def test_iso_timestamp_strings_compare_chronologically() -> None:
    assert matches(DOC, QueryLeaf(path="time", op="gt", value="2024-01-15"))
    assert not matches(DOC, QueryLeaf(path="time", op="lt", value="2024-01-15"))


def test_datetime_query_value_parses_stored_string() -> None:
    after = datetime(2024, 1, 15, tzinfo=UTC)
    before = datetime(2024, 3, 1, tzinfo=UTC)
    query = and_(
        QueryLeaf(path="time", op="gt", value=after),
        QueryLeaf(path="time", op="lt", value=before),
    )
    assert matches(DOC, query)


@pytest.mark.parametrize("op", ["eq", "ne", "gt", "gte", "lt", "lte"])
def test_naive_datetime_against_aware_value_is_false(op: str) -> None:
    assert not matches(DOC, QueryLeaf(path="time", op=op, value=datetime(2024, 1, 1)))


@pytest.mark.parametrize("op", ["eq", "ne", "gt", "gte", "lt", "lte"])
def test_aware_datetime_against_naive_value_is_false(op: str) -> None:
    document = {"time": "2024-02-01T10:00:00"}
    assert not matches(document, QueryLeaf(path="time", op=op, value=datetime(2024, 1, 1, tzinfo=UTC)))


def test_datetime_ne_between_aware_values() -> None:
    assert matches(DOC, QueryLeaf(path="time", op="ne", value=datetime(2024, 1, 1, tzinfo=UTC)))
    assert not matches(DOC, QueryLeaf(path="time", op="ne", value=datetime(2024, 2, 1, 10, tzinfo=UTC)))


def test_date_query_value_compares_as_iso_string() -> None:
    assert matches(DOC, QueryLeaf(path="time", op="gte", value=date(2024, 2, 1)))
    assert not matches(DOC, QueryLeaf(path="time", op="gte", value=date(2024, 2, 2)))


def test_regex_operator() -> None:
    assert matches(DOC, QueryLeaf(path="context.account.email", op="regex", value=r"@example\.com$"))
    assert not matches(DOC, QueryLeaf(path="context.account.email", op="regex", value="^b"))


def test_invalid_regex_is_false() -> None:
    assert not matches(DOC, QueryLeaf(path="context.account.email", op="regex", value="("))


@pytest.mark.parametrize("op", ["eq", "ne", "gt", "gte", "lt", "lte", "regex"])
def test_missing_path_is_false_for_every_operator(op: str) -> None:
    assert not matches(DOC, QueryLeaf(path="context.missing.field", op=op, value="x"))  # type: ignore[arg-type]


@pytest.mark.parametrize("op", ["eq", "ne", "gt", "gte", "lt", "lte"])
def test_type_mismatch_is_false_for_every_operator(op: str) -> None:
    assert not matches(DOC, QueryLeaf(path="count", op=op, value="3"))  # type: ignore[arg-type]
    assert not matches(DOC, QueryLeaf(path="time", op=op, value=20240201))  # type: ignore[arg-type]


def test_bool_and_number_are_different_families() -> None:
    assert not matches(DOC, QueryLeaf(path="enabled", value=1))
    assert matches(DOC, QueryLeaf(path="enabled", value=True))


def test_null_equality() -> None:
    assert matches(DOC, QueryLeaf(path="note", value=None))
    assert not matches(DOC, QueryLeaf(path="note", op="gt", value=None))


def test_containers_support_equality_only() -> None:
    assert matches(DOC, QueryLeaf(path="context.tags", value=["x", "y"]))
    assert not matches(DOC, QueryLeaf(path="context.tags", op="gt", value=["a"]))


def test_empty_and_is_true_empty_or_is_false() -> None:
    assert matches(DOC, QueryGroup(op="and", queries=[]))
    assert not matches(DOC, QueryGroup(op="or", queries=[]))


def test_or_of_emails() -> None:
    query = parse_query(
        {
            "op": "or",
            "queries": [
                {"path": "context.account.email", "value": "b@example.com"},
                {"path": "context.account.email", "value": "a@example.com"},
            ],
        }
    )
    assert matches(DOC, query)


def test_not_combinator() -> None:
    assert matches(DOC, not_(QueryLeaf(path="count", value=4)))
    assert not matches(DOC, not_(QueryLeaf(path="count", value=3)))


class _Tripwire(Mapping[str, object]):
    """Document that fails the test if the ``boom`` key is ever read."""

    def __init__(self, **values: object) -> None:
        self._values = values

    def __getitem__(self, key: str) -> object:
        if key == "boom":
            raise AssertionError("sub-query evaluated after short-circuit")
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


def test_and_short_circuits_on_first_false() -> None:
    document = _Tripwire(count=3)
    assert not matches(document, and_(QueryLeaf(path="count", value=99), QueryLeaf(path="boom", value=1)))


def test_or_short_circuits_on_first_true() -> None:
    document = _Tripwire(count=3)
    assert matches(document, or_(QueryLeaf(path="count", value=3), QueryLeaf(path="boom", value=1)))


def test_matches_accepts_models() -> None:
    event = Event(id="e1", time="2024-01-01", context={"account": {"email": "x@example.com"}})
    assert matches(event, QueryLeaf(path="context.account.email", value="x@example.com"))
    assert matches(event, QueryLeaf(path="id", value="e1"))


@pytest.mark.parametrize(
    "document",
    [None, 42, "text", [], [1, 2], {"a": object()}, {"count": float("nan")}],
)
def test_matches_is_total_on_odd_documents(document: object) -> None:
    query = or_(
        QueryLeaf(path="a.b", op="gt", value=1),
        QueryLeaf(path="count", op="lt", value=1),
        QueryLeaf(path="", op="eq", value=None),
        not_(QueryLeaf(path="0", op="regex", value="x")),
    )
    assert isinstance(matches(document, query), bool)

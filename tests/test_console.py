from __future__ import annotations

from scanstore.models import ListResponse
from scanstore.renderers import render_listing

from conftest import Event, Note


def _page() -> ListResponse[Event]:
    items = [
        Event(id="e1", time="2024-03-01", context={"account": {"email": "a@example.com"}}),
        Event(id="e2", time="2024-02-01", context={}),
    ]
    return ListResponse(items=items, offset=50, total=120)


def test_render_listing_default_columns_are_top_level_fields() -> None:
    output = render_listing(_page(), title="event")

    assert "event" in output
    for header in ("id", "time", "action", "context"):
        assert header in output
    assert "2024-03-01" in output
    assert "50 - 52 / 120" in output


def test_render_listing_selected_columns() -> None:
    output = render_listing(_page(), columns=["id", "context.account.email"])

    assert "a@example.com" in output
    assert "2024-03-01" not in output


def test_render_listing_truncates_large_values() -> None:
    note = Note(id="n1", title="x" * 500)
    output = render_listing(ListResponse(items=[note], offset=0, total=1))

    assert "..." in output
    assert "x" * 100 not in output


def test_render_empty_listing() -> None:
    output = render_listing(ListResponse(items=[], offset=0, total=0))

    assert "id" in output
    assert "0 - 0 / 0" in output

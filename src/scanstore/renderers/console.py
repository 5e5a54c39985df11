"""Rich-based console rendering of listings."""

from __future__ import annotations

import json
from collections.abc import Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table

from ..models import ListResponse, Storable
from ..query import MISSING, resolve_path

_MAX_VALUE_LEN = 60


def render_listing(
    response: ListResponse[Storable],
    *,
    columns: Sequence[str] | None = None,
    title: str | None = None,
) -> str:
    """Render one page as a table followed by an ``offset - end / total`` line.

    ``columns`` are dotted paths; by default the top-level fields of the
    first item are shown.
    """
    documents = [item.to_document() for item in response.items]
    if columns is None:
        columns = list(documents[0].keys()) if documents else ["id"]

    table = Table(title=title)
    for column in columns:
        table.add_column(column, overflow="fold")
    for document in documents:
        table.add_row(*(_format_value(resolve_path(document, column)) for column in columns))

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(table)
    console.print(_page_label(response))
    return console.export_text()


def _page_label(response: ListResponse[Storable]) -> str:
    end = response.offset + len(response.items)
    return f"{response.offset} - {end} / {response.total}"


def _format_value(value: object) -> str:
    """Format a cell for display, truncating large values."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, str):
        s = value
    else:
        try:
            s = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    if len(s) <= _MAX_VALUE_LEN:
        return s
    return s[:_MAX_VALUE_LEN] + "..."

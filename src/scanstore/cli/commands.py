"""Subcommand implementations."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from ..config import StorageConfig
from ..exceptions import ScanstoreError
from ..models import StorageQuery, parse_query, record_type
from ..renderers import render_listing
from ..storage import ListFacade, OrderedStorage


async def run_list(
    directory: Path,
    kind: str,
    *,
    query: str | None,
    order_by: str | None,
    descending: bool,
    offset: int,
    limit: int | None,
    columns: list[str] | None,
    as_json: bool,
) -> int:
    try:
        parsed = _parse_query_arg(query)
    except ValueError as exc:
        print(f"Error: invalid --query: {exc}", file=sys.stderr)
        return 1
    storage = _open(directory)
    if storage is None:
        return 1

    try:
        async with storage:
            response = await ListFacade(storage).list(
                record_type(kind),
                offset=offset,
                limit=limit,
                query=parsed,
                order_by=order_by,
                order_by_direction="desc" if descending else "asc",
            )
    except (ScanstoreError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if as_json:
        payload = {
            "items": [item.to_document() for item in response.items],
            "offset": response.offset,
            "total": response.total,
        }
        print(json.dumps(payload, ensure_ascii=True, sort_keys=True))
        return 0

    print(render_listing(response, columns=columns, title=kind))
    return 0


async def run_count(directory: Path, kind: str, *, query: str | None) -> int:
    try:
        parsed = _parse_query_arg(query)
    except ValueError as exc:
        print(f"Error: invalid --query: {exc}", file=sys.stderr)
        return 1
    storage = _open(directory)
    if storage is None:
        return 1

    try:
        async with storage:
            total = await ListFacade(storage).count(record_type(kind), parsed)
    except (ScanstoreError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(total)
    return 0


async def run_get(directory: Path, kind: str, object_id: str) -> int:
    storage = _open(directory)
    if storage is None:
        return 1

    try:
        async with storage:
            item = await storage.get(record_type(kind), object_id)
    except (ScanstoreError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(item.to_document(), ensure_ascii=True, indent=2, sort_keys=True))
    return 0


def _open(directory: Path) -> OrderedStorage | None:
    config = StorageConfig(dir=directory)
    if not config.path.exists():
        print(f"Error: no store found at {config.path}", file=sys.stderr)
        return None
    try:
        return OrderedStorage(config=config)
    except ScanstoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _parse_query_arg(raw: str | None) -> StorageQuery | None:
    """Parse a ``--query`` JSON argument. Raises ``ValueError`` on bad input."""
    if raw is None:
        return None
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("query must be a JSON object")
    return parse_query(data)

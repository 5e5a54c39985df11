"""Command line interface for scanstore."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from .commands import run_count, run_get, run_list


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scanstore")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List objects of a kind")
    _add_target_arguments(list_parser)
    list_parser.add_argument("--query", default=None, help="Query tree as JSON")
    list_parser.add_argument("--order-by", default=None, help="Dotted field path to order by")
    list_parser.add_argument("--desc", action="store_true", help="Order descending")
    list_parser.add_argument("--offset", type=_non_negative, default=0)
    list_parser.add_argument("--limit", type=_non_negative, default=None)
    list_parser.add_argument(
        "--column",
        action="append",
        dest="columns",
        default=None,
        help="Dotted field path to show as a column (repeatable)",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the page as JSON instead of a table",
    )

    count_parser = subparsers.add_parser("count", help="Count objects of a kind")
    _add_target_arguments(count_parser)
    count_parser.add_argument("--query", default=None, help="Query tree as JSON")

    get_parser = subparsers.add_parser("get", help="Print one object as JSON")
    _add_target_arguments(get_parser)
    get_parser.add_argument("id", help="Object id")
    return parser


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("directory", type=Path, help="Storage directory")
    parser.add_argument("kind", help="Object kind")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        return asyncio.run(
            run_list(
                args.directory,
                args.kind,
                query=args.query,
                order_by=args.order_by,
                descending=args.desc,
                offset=args.offset,
                limit=args.limit,
                columns=args.columns,
                as_json=args.json,
            )
        )
    if args.command == "count":
        return asyncio.run(run_count(args.directory, args.kind, query=args.query))
    if args.command == "get":
        return asyncio.run(run_get(args.directory, args.kind, args.id))

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

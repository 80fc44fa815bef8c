"""PlainRecalls CLI entry points.
This module exposes commands for building and inspecting the recall store.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import RecallsConfig
from core.constants import DEFAULT_PAGE_SIZE
from core.source_manifest import load_source_manifest
from core.taxonomy import agency_ids, category_ids
from core.types import BuildOptions, RecallQuery
from store.recall_sdk import RecallsClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="plainrecalls", description="PlainRecalls store CLI")
    parser.add_argument("--raw-dir", help="Override PLAINRECALLS_RAW_DIR for this command")
    parser.add_argument("--db-path", help="Override PLAINRECALLS_DB_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_build_command(subparsers)
    _add_stats_command(subparsers)
    _add_search_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the PlainRecalls CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.raw_dir, args.db_path)
    if args.command == "build":
        return _run_build_command(client, args)
    if args.command == "stats":
        return _run_stats_command(client)
    if args.command == "search":
        return _run_search_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(raw_dir: str | None, db_path: str | None) -> RecallsClient:
    """Build SDK client with optional path overrides.

    Args:
        raw_dir: Optional raw source directory override.
        db_path: Optional store path override.

    Returns:
        Configured SDK client.
    """
    config = RecallsConfig.from_env()
    if raw_dir:
        config = replace(config, raw_dir=Path(raw_dir).expanduser().resolve())
    if db_path:
        config = replace(config, db_path=Path(db_path).expanduser().resolve())
    return RecallsClient(config)


def _run_build_command(client: RecallsClient, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    sources = load_source_manifest(args.sources) if args.sources else None
    options = BuildOptions(batch_size=args.batch_size, sources=sources)
    result = client.build(options)
    print(f"db_path={result.db_path}")
    print(f"recalls={result.recall_count}")
    print(f"manufacturers={result.manufacturer_count}")
    return 0


def _run_stats_command(client: RecallsClient) -> int:
    """Handle stats command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    statistics = client.statistics()
    print(f"total_recalls={statistics.total_recalls}")
    print(f"year_min={statistics.year_min or '-'}")
    print(f"year_max={statistics.year_max or '-'}")
    for bucket in statistics.recalls_by_year:
        print(f"{bucket.year}\t{bucket.count}")
    return 0


def _run_search_command(client: RecallsClient, args: argparse.Namespace) -> int:
    """Handle search command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    query = RecallQuery(
        text=args.query,
        agency=args.agency,
        category_id=args.category,
        manufacturer_id=args.manufacturer,
        date_from=args.date_from,
        date_to=args.date_to,
        page=args.page,
        per_page=args.per_page,
    )
    with client.reader() as reader:
        result = reader.search_recalls(query)
    for recall in result.recalls:
        print(
            f"{recall.date_reported or '-'}\t"
            f"{recall.agency}\t"
            f"{recall.slug}\t"
            f"{recall.title}"
        )
    print(f"total={result.total}\tpage={result.page}\tper_page={result.per_page}")
    return 0


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser("build", help="Rebuild the store from raw source files")
    parser.add_argument("--sources", help="Optional YAML source manifest file")
    parser.add_argument("--batch-size", type=int, help="Rows per insert transaction")


def _add_stats_command(subparsers: Any) -> None:
    """Register stats subcommand."""
    subparsers.add_parser("stats", help="Print precomputed store statistics")


def _add_search_command(subparsers: Any) -> None:
    """Register search subcommand."""
    parser = subparsers.add_parser("search", help="Search and filter stored recalls")
    parser.add_argument("query", nargs="?", help="Substring matched against title, firm, number")
    parser.add_argument("--agency", choices=agency_ids(), help="Agency filter")
    parser.add_argument("--category", choices=category_ids(), help="Category filter")
    parser.add_argument("--manufacturer", help="Manufacturer slug filter")
    parser.add_argument("--date-from", help="Inclusive YYYY-MM-DD lower bound")
    parser.add_argument("--date-to", help="Inclusive YYYY-MM-DD upper bound")
    parser.add_argument("--page", type=int, default=1, help="One-based page number")
    parser.add_argument("--per-page", type=int, default=DEFAULT_PAGE_SIZE, help="Rows per page")

"""
Raise every manager's budget to at least a target floor.

Budgets already at or above the floor are left alone, so running the
migration twice with the same target changes nothing the second time.

Usage:
  python migrate_budgets.py --target 900000000 --dry-run
  python migrate_budgets.py --target 900000000

Exit codes: 0 success, 1 fatal error, 2 some managers could not be updated.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from config import DEFAULT_TARGET_BUDGET
from infrastructure.service_container import ServiceConfig, ServiceContainer
from infrastructure.store_client import IStoreClient
from infrastructure.store_errors import StoreError
from utils.formatting import format_budget
from utils.maintenance_report import render_migration_summary
from utils.script_helpers import (
    EXIT_FATAL,
    EXIT_OK,
    EXIT_PARTIAL,
    add_common_arguments,
    configure_logging,
    non_negative_int,
)

logger = logging.getLogger("fury_fm.scripts.migrate_budgets")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="migrate-budgets",
        description="Raise every manager budget below the target up to the target. Never lowers a budget.",
    )
    parser.add_argument(
        "--target",
        type=non_negative_int,
        required=True,
        help=f"Budget floor in currency units (the game default is {DEFAULT_TARGET_BUDGET}, "
        f"{format_budget(DEFAULT_TARGET_BUDGET)})",
    )
    add_common_arguments(parser)
    return parser


async def _run(args: argparse.Namespace, service_config: ServiceConfig, store: IStoreClient | None) -> int:
    container = ServiceContainer(service_config, store=store)
    print("Starting budget migration...")
    try:
        async with container:
            result = await container.budget_service.run_budget_migration(args.target, dry_run=args.dry_run)
    except StoreError as exc:
        logger.error("Budget migration aborted", exc_info=True)
        print(f"ERROR: migration aborted: {exc}", file=sys.stderr)
        return EXIT_FATAL

    if not result:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FATAL

    summary = result.unwrap()
    for line in render_migration_summary(summary):
        print(line)
    return EXIT_PARTIAL if summary.failures else EXIT_OK


def main(argv: list[str] | None = None, store: IStoreClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    service_config = ServiceConfig.from_env(concurrency=args.concurrency)
    if store is None and not service_config.database_url:
        print("ERROR: FIREBASE_DATABASE_URL is not set", file=sys.stderr)
        return EXIT_FATAL
    return asyncio.run(_run(args, service_config, store))


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

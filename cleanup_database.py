"""
Clear all loans and matches and reset every manager's performance counters.

Budgets are preserved. Every step is idempotent, so an interrupted run can be
repeated.

Usage:
  python cleanup_database.py --dry-run
  python cleanup_database.py
  python cleanup_database.py --concurrency 8 --verbose

Exit codes: 0 success, 1 fatal error, 2 some managers could not be reset.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from infrastructure.service_container import ServiceConfig, ServiceContainer
from infrastructure.store_client import IStoreClient
from infrastructure.store_errors import StoreError
from utils.maintenance_report import render_cleanup_summary
from utils.script_helpers import EXIT_FATAL, EXIT_OK, EXIT_PARTIAL, add_common_arguments, configure_logging

logger = logging.getLogger("fury_fm.scripts.cleanup")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cleanup",
        description="Clear loans and matches and reset manager points, wins, losses, draws and matchesPlayed.",
    )
    add_common_arguments(parser)
    return parser


async def _run(args: argparse.Namespace, service_config: ServiceConfig, store: IStoreClient | None) -> int:
    container = ServiceContainer(service_config, store=store)
    print("Starting database cleanup...")
    try:
        async with container:
            summary = await container.cleanup_service.run_cleanup(dry_run=args.dry_run)
    except StoreError as exc:
        logger.error("Cleanup aborted", exc_info=True)
        print(f"ERROR: cleanup aborted: {exc}", file=sys.stderr)
        return EXIT_FATAL

    for line in render_cleanup_summary(summary, verbose=args.verbose):
        print(line)

    if not summary.is_complete:
        print(f"{summary.failed_count} manager(s) were not reset; re-run to retry.", file=sys.stderr)
        return EXIT_PARTIAL
    print("Database cleanup completed successfully!")
    return EXIT_OK


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

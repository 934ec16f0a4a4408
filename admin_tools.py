"""
Occasional admin operations on manager records.

  add-budget    add a flat amount to every manager, or to one manager
                looked up by email or manager name
  reset-points  zero points, wins, losses and draws (loans, matches and
                matchesPlayed are kept)

add-budget is not idempotent: every run adds the amount again. Use
--dry-run first.

Usage:
  python admin_tools.py add-budget --amount 50000000 --dry-run
  python admin_tools.py add-budget --amount 50000000 --manager alice@example.com
  python admin_tools.py reset-points
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from infrastructure.service_container import ServiceConfig, ServiceContainer
from infrastructure.store_client import IStoreClient
from infrastructure.store_errors import StoreError
from utils.maintenance_report import (
    DRY_RUN_BANNER,
    render_budget_change,
    render_cleanup_summary,
    render_migration_summary,
)
from utils.script_helpers import (
    EXIT_FATAL,
    EXIT_OK,
    EXIT_PARTIAL,
    add_common_arguments,
    configure_logging,
    positive_int,
)

logger = logging.getLogger("fury_fm.scripts.admin")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fury-admin", description="Admin operations on manager records.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_budget = subparsers.add_parser("add-budget", help="Add an amount to manager budgets")
    add_budget.add_argument("--amount", type=positive_int, required=True, help="Amount to add, in currency units")
    add_budget.add_argument("--manager", help="Only this manager (email or manager name, case-insensitive)")
    add_common_arguments(add_budget)

    reset_points = subparsers.add_parser("reset-points", help="Zero points, wins, losses and draws")
    add_common_arguments(reset_points)
    return parser


async def _add_budget(container: ServiceContainer, args: argparse.Namespace) -> int:
    service = container.budget_service
    if args.manager:
        result = await service.add_budget_to_manager(args.manager, args.amount, dry_run=args.dry_run)
        if not result:
            print(f"ERROR ({result.error_code}): {result.error}", file=sys.stderr)
            return EXIT_FATAL
        if args.dry_run:
            print(DRY_RUN_BANNER)
        for line in render_budget_change(result.unwrap(), dry_run=args.dry_run):
            print(line)
        return EXIT_OK

    result = await service.add_budget_to_all(args.amount, dry_run=args.dry_run)
    if not result:
        print(f"ERROR ({result.error_code}): {result.error}", file=sys.stderr)
        return EXIT_FATAL
    summary = result.unwrap()
    for line in render_migration_summary(summary, verbose=True):
        print(line)
    return EXIT_PARTIAL if summary.failures else EXIT_OK


async def _reset_points(container: ServiceContainer, args: argparse.Namespace) -> int:
    summary = await container.cleanup_service.reset_points(dry_run=args.dry_run)
    for line in render_cleanup_summary(summary, verbose=args.verbose):
        print(line)
    return EXIT_OK if summary.is_complete else EXIT_PARTIAL


_COMMANDS = {
    "add-budget": _add_budget,
    "reset-points": _reset_points,
}


async def _run(args: argparse.Namespace, service_config: ServiceConfig, store: IStoreClient | None) -> int:
    handler = _COMMANDS[args.command]
    try:
        async with ServiceContainer(service_config, store=store) as container:
            return await handler(container, args)
    except StoreError as exc:
        logger.error(f"{args.command} aborted", exc_info=True)
        print(f"ERROR: {args.command} aborted: {exc}", file=sys.stderr)
        return EXIT_FATAL


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

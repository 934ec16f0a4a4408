"""
Helpers shared by the maintenance scripts: logging setup, exit codes and
argparse value types.
"""

import argparse
import logging

from config import LOG_LEVEL

EXIT_OK = 0
EXIT_FATAL = 1
# Run completed but some managers could not be written; re-running is safe
EXIT_PARTIAL = 2


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once per script run."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    # urllib3 logs every request at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def positive_int(raw: str) -> int:
    value = non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dry-run", action="store_true", help="Preview changes without writing anything")
    parser.add_argument(
        "--concurrency",
        type=positive_int,
        default=None,
        help="Max managers updated at once (default: MAINTENANCE_CONCURRENCY or 1)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging and per-manager output")

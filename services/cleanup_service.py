"""
Service for wiping transient game data between seasons.

A cleanup removes every loan and match and resets each manager's
performance counters to zero. Budgets are never part of the patch, so the
merge semantics of the store leave them untouched.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from domain.models.manager import COUNTER_FIELDS, POINTS_FIELDS, Manager
from repositories.interfaces import ICollectionRepository, IManagerRepository
from services.interfaces import ICleanupService
from services.manager_sweep import ManagerFailure, sweep_managers

logger = logging.getLogger("fury_fm.services.cleanup")


@dataclass
class CleanupSummary:
    """Outcome of a cleanup or points reset."""

    reset_fields: tuple[str, ...] = COUNTER_FIELDS
    clears_collections: bool = True
    loans_removed: int = 0
    matches_removed: int = 0
    loans_cleared: bool = False
    matches_cleared: bool = False
    managers_found: int = 0
    updated: list[Manager] = field(default_factory=list)
    failures: list[ManagerFailure] = field(default_factory=list)
    dry_run: bool = False

    @property
    def updated_count(self) -> int:
        return len(self.updated)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def is_complete(self) -> bool:
        """True when every step succeeded for every manager."""
        collections_ok = (
            not self.clears_collections
            or self.dry_run
            or (self.loans_cleared and self.matches_cleared)
        )
        return collections_ok and not self.failures


class CleanupService(ICleanupService):
    """
    Resets league state.

    Order of a cleanup:
    1. loans and matches are deleted (concurrently, both attempted)
    2. managers are read
    3. each manager's counters are zeroed; failures are collected, not raised

    Every step is idempotent, so an interrupted run can simply be repeated.
    """

    def __init__(
        self,
        manager_repo: IManagerRepository,
        loan_repo: ICollectionRepository,
        match_repo: ICollectionRepository,
        concurrency: int = 1,
    ):
        self.manager_repo = manager_repo
        self.loan_repo = loan_repo
        self.match_repo = match_repo
        self.concurrency = max(1, concurrency)

    async def _clear_collections(self, summary: CleanupSummary) -> None:
        """
        Delete loans and matches.

        Both deletes are attempted even if one fails; the first failure is then
        raised so the manager sweep never runs against a half-cleaned store.
        """
        if summary.dry_run:
            summary.loans_removed, summary.matches_removed = await asyncio.gather(
                self.loan_repo.count(), self.match_repo.count()
            )
            return

        loans, matches = await asyncio.gather(
            self.loan_repo.clear(), self.match_repo.clear(), return_exceptions=True
        )
        for name, outcome in (("loans", loans), ("matches", matches)):
            if isinstance(outcome, BaseException):
                logger.error(f"Failed to clear {name}: {outcome}")
        for outcome in (loans, matches):
            if isinstance(outcome, BaseException):
                raise outcome

        summary.loans_removed = loans
        summary.matches_removed = matches
        summary.loans_cleared = True
        summary.matches_cleared = True

    async def _reset_managers(self, summary: CleanupSummary) -> None:
        managers = await self.manager_repo.get_all()
        summary.managers_found = len(managers)
        if not managers:
            logger.info("No managers found; nothing to reset")
            return

        logger.info(f"Resetting {', '.join(summary.reset_fields)} for {len(managers)} manager(s)")
        if summary.dry_run:
            summary.updated = list(managers.values())
            return

        async def _reset(manager: Manager) -> None:
            await self.manager_repo.reset_counters(manager.manager_id, summary.reset_fields)
            logger.debug(f"Reset {manager.manager_id}; budget {manager.budget} preserved")

        summary.updated, summary.failures = await sweep_managers(
            managers.values(), _reset, concurrency=self.concurrency, operation="reset"
        )

    async def run_cleanup(self, *, dry_run: bool = False) -> CleanupSummary:
        """
        Clear loans and matches, then zero every manager's counters.

        Raises:
            StoreError: If loans or matches cannot be cleared, managers cannot be
                read, or the session drops during the sweep
        """
        summary = CleanupSummary(dry_run=dry_run)
        await self._clear_collections(summary)
        await self._reset_managers(summary)
        logger.info(
            f"Cleanup finished: {summary.updated_count} reset, {summary.failed_count} failed"
            + (" (dry run)" if dry_run else "")
        )
        return summary

    async def reset_points(self, *, dry_run: bool = False) -> CleanupSummary:
        """
        Zero points, wins, losses and draws only.

        Loans, matches and matchesPlayed are left alone.
        """
        summary = CleanupSummary(reset_fields=POINTS_FIELDS, clears_collections=False, dry_run=dry_run)
        await self._reset_managers(summary)
        return summary

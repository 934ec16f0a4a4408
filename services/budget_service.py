"""
Service for manager budget maintenance.

Budgets are only ever raised here: the migration lifts every budget below a
floor up to that floor, and the top-up operations add a positive amount.
"""

import logging
from dataclasses import dataclass, field

from domain.models.manager import Manager
from infrastructure.store_errors import RecordNotFoundError, StoreWriteError
from repositories.interfaces import IManagerRepository
from services import error_codes
from services.interfaces import IBudgetService
from services.manager_sweep import ManagerFailure, sweep_managers
from services.result import Result

logger = logging.getLogger("fury_fm.services.budget")


@dataclass(frozen=True)
class BudgetChange:
    """A budget that was (or, in a dry run, would be) raised."""

    manager_id: str
    name: str
    old_budget: int | float
    new_budget: int | float

    @property
    def delta(self) -> int | float:
        return self.new_budget - self.old_budget


@dataclass(frozen=True)
class BudgetSkip:
    """A manager already at or above the floor."""

    manager_id: str
    name: str
    budget: int | float


@dataclass
class MigrationSummary:
    """Outcome of a budget migration or top-up."""

    target_budget: int | None = None  # floor for migrations
    amount_added: int | None = None  # flat amount for top-ups
    managers_found: int = 0
    updates: list[BudgetChange] = field(default_factory=list)
    skipped: list[BudgetSkip] = field(default_factory=list)
    failures: list[ManagerFailure] = field(default_factory=list)
    dry_run: bool = False

    @property
    def updated_count(self) -> int:
        return len(self.updates)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


class BudgetService(IBudgetService):
    """Raises manager budgets; never lowers them."""

    def __init__(self, manager_repo: IManagerRepository, concurrency: int = 1):
        self.manager_repo = manager_repo
        self.concurrency = max(1, concurrency)

    async def _apply(self, summary: MigrationSummary, plan: dict[str, BudgetChange], managers: dict[str, Manager]) -> None:
        """Write every planned change, keeping only the ones that landed."""
        if summary.dry_run:
            summary.updates = list(plan.values())
            return

        async def _write(manager: Manager) -> None:
            change = plan[manager.manager_id]
            await self.manager_repo.set_budget(manager.manager_id, change.new_budget)
            logger.debug(f"Budget {manager.manager_id}: {change.old_budget} -> {change.new_budget}")

        succeeded, summary.failures = await sweep_managers(
            (managers[manager_id] for manager_id in plan),
            _write,
            concurrency=self.concurrency,
            operation="update budget of",
        )
        summary.updates = [plan[manager.manager_id] for manager in succeeded]

    async def run_budget_migration(self, target_budget: int, *, dry_run: bool = False) -> Result[MigrationSummary]:
        """
        Raise every budget below target_budget to exactly target_budget.

        Managers already at or above the floor are skipped without a write, so
        a second run with the same floor updates nobody. A missing budget
        counts as 0.

        Raises:
            StoreError: If the managers collection cannot be read or the session drops
        """
        if target_budget < 0:
            return Result.fail(
                f"Target budget must not be negative (got {target_budget})",
                code=error_codes.VALIDATION_ERROR,
            )

        summary = MigrationSummary(target_budget=target_budget, dry_run=dry_run)
        managers = await self.manager_repo.get_all()
        summary.managers_found = len(managers)
        if not managers:
            logger.info("No managers found; nothing to migrate")
            return Result.ok(summary)

        plan: dict[str, BudgetChange] = {}
        for manager_id, manager in managers.items():
            if manager.budget < target_budget:
                plan[manager_id] = BudgetChange(manager_id, manager.display_name, manager.budget, target_budget)
            else:
                summary.skipped.append(BudgetSkip(manager_id, manager.display_name, manager.budget))

        logger.info(
            f"Budget floor {target_budget}: {len(plan)} to raise, {summary.skipped_count} already at or above"
        )
        await self._apply(summary, plan, managers)
        return Result.ok(summary)

    async def add_budget_to_all(self, amount: int, *, dry_run: bool = False) -> Result[MigrationSummary]:
        """
        Add amount to every manager's budget.

        Unlike the migration this is not idempotent: each run adds again.
        """
        if amount <= 0:
            return Result.fail(f"Amount must be positive (got {amount})", code=error_codes.VALIDATION_ERROR)

        summary = MigrationSummary(amount_added=amount, dry_run=dry_run)
        managers = await self.manager_repo.get_all()
        summary.managers_found = len(managers)
        if not managers:
            logger.info("No managers found; nothing to top up")
            return Result.ok(summary)

        plan = {
            manager_id: BudgetChange(manager_id, manager.display_name, manager.budget, manager.budget + amount)
            for manager_id, manager in managers.items()
        }
        await self._apply(summary, plan, managers)
        return Result.ok(summary)

    async def add_budget_to_manager(
        self, identifier: str, amount: int, *, dry_run: bool = False
    ) -> Result[BudgetChange]:
        """
        Add amount to the budget of the manager matching identifier.

        The identifier is compared case-insensitively against email and
        manager name; the first match wins.
        """
        if amount <= 0:
            return Result.fail(f"Amount must be positive (got {amount})", code=error_codes.VALIDATION_ERROR)

        manager = await self.manager_repo.find_by_identifier(identifier)
        if manager is None:
            return Result.fail(
                f"No manager found with email or name '{identifier}'",
                code=error_codes.MANAGER_NOT_FOUND,
            )

        change = BudgetChange(manager.manager_id, manager.display_name, manager.budget, manager.budget + amount)
        if dry_run:
            return Result.ok(change)

        try:
            await self.manager_repo.set_budget(manager.manager_id, change.new_budget)
        except (StoreWriteError, RecordNotFoundError) as exc:
            logger.warning(f"Failed to update budget of manager {manager.manager_id}: {exc}")
            return Result.fail(
                f"Could not update manager {manager.manager_id}: {exc}",
                code=error_codes.WRITE_FAILED,
            )
        return Result.ok(change)

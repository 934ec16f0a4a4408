"""
Service interfaces (ABCs) for the maintenance tools.

Scripts depend on these contracts; tests may supply fakes.
"""

from abc import ABC, abstractmethod


class ICleanupService(ABC):
    @abstractmethod
    async def run_cleanup(self, *, dry_run: bool = False):
        """Clear loans and matches, then reset every manager's counters."""
        ...

    @abstractmethod
    async def reset_points(self, *, dry_run: bool = False):
        """Reset points, wins, losses and draws for every manager."""
        ...


class IBudgetService(ABC):
    @abstractmethod
    async def run_budget_migration(self, target_budget: int, *, dry_run: bool = False):
        """Raise every budget below target_budget up to it."""
        ...

    @abstractmethod
    async def add_budget_to_all(self, amount: int, *, dry_run: bool = False): ...

    @abstractmethod
    async def add_budget_to_manager(self, identifier: str, amount: int, *, dry_run: bool = False): ...

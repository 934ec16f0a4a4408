"""
Best-effort per-manager write loop shared by the maintenance services.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from domain.models.manager import Manager
from infrastructure.store_errors import RecordNotFoundError, StoreWriteError

logger = logging.getLogger("fury_fm.services.sweep")


@dataclass(frozen=True)
class ManagerFailure:
    """A manager whose write failed; enough context to retry by hand."""

    manager_id: str
    name: str
    error: str


async def sweep_managers(
    managers: Iterable[Manager],
    action: Callable[[Manager], Awaitable[None]],
    *,
    concurrency: int = 1,
    operation: str = "update",
) -> tuple[list[Manager], list[ManagerFailure]]:
    """
    Apply action to every manager, containing store failures per manager.

    At most `concurrency` actions are in flight. A write that fails or finds
    its record gone is logged and recorded for that manager; the remaining
    managers are still processed. Anything else, a lost connection
    included, propagates and ends the sweep.

    Returns:
        (succeeded, failures), each in input order
    """
    managers = list(managers)
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def _run(manager: Manager) -> ManagerFailure | None:
        async with semaphore:
            try:
                await action(manager)
            except (StoreWriteError, RecordNotFoundError) as exc:
                logger.warning(
                    f"Failed to {operation} manager {manager.manager_id} ({manager.display_name}): {exc}"
                )
                return ManagerFailure(manager.manager_id, manager.display_name, str(exc))
        return None

    if concurrency <= 1:
        outcomes = [await _run(manager) for manager in managers]
    else:
        tasks = [asyncio.ensure_future(_run(manager)) for manager in managers]
        try:
            outcomes = await asyncio.gather(*tasks)
        except BaseException:
            # managers still queued on the semaphore must not start
            for task in tasks:
                task.cancel()
            raise

    succeeded = [m for m, outcome in zip(managers, outcomes) if outcome is None]
    failures = [outcome for outcome in outcomes if outcome is not None]
    return succeeded, failures

"""
Repository for manager profile records.
"""

import logging
from typing import Any

from domain.models.manager import FIELD_BUDGET, Manager
from infrastructure.store_errors import StoreReadError
from repositories.base_repository import BaseRepository
from repositories.interfaces import IManagerRepository

logger = logging.getLogger("fury_fm.repositories.manager")


class ManagerRepository(BaseRepository, IManagerRepository):
    """Data access for managers/{id} records."""

    collection = "managers"

    async def get_all(self) -> dict[str, Manager]:
        """
        Read every manager.

        Returns an empty dict when the collection does not exist.

        Raises:
            StoreReadError: If the collection cannot be read or has an unexpected shape
        """
        raw = await self.store.fetch_subtree(self.collection)
        if raw is None:
            return {}

        # The database serves objects with small sequential integer keys as arrays
        if isinstance(raw, list):
            raw = {str(index): record for index, record in enumerate(raw) if record is not None}
        if not isinstance(raw, dict):
            raise StoreReadError(
                f"Expected '{self.collection}' to be a collection, got {type(raw).__name__}",
                self.collection,
            )

        return {
            str(manager_id): Manager.from_record(manager_id, record)
            for manager_id, record in raw.items()
        }

    async def find_by_identifier(self, identifier: str) -> Manager | None:
        for manager in (await self.get_all()).values():
            if manager.matches_identifier(identifier):
                return manager
        return None

    async def update_fields(self, manager_id: str, fields: dict[str, Any]) -> None:
        await self.store.patch_record(self.record_path(manager_id), fields)

    async def reset_counters(self, manager_id: str, fields: tuple[str, ...]) -> None:
        """Set the given counters to 0. Other fields (budget included) are untouched."""
        if FIELD_BUDGET in fields:
            raise ValueError("Budget is not a counter and cannot be reset")
        await self.update_fields(manager_id, {field_name: 0 for field_name in fields})

    async def set_budget(self, manager_id: str, budget: int | float) -> None:
        await self.update_fields(manager_id, {FIELD_BUDGET: budget})

"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod
from typing import Any


class IManagerRepository(ABC):
    @abstractmethod
    async def get_all(self) -> dict: ...

    @abstractmethod
    async def find_by_identifier(self, identifier: str):
        """Find a manager by email or manager name (case-insensitive)."""
        ...

    @abstractmethod
    async def update_fields(self, manager_id: str, fields: dict[str, Any]) -> None: ...

    @abstractmethod
    async def reset_counters(self, manager_id: str, fields: tuple[str, ...]) -> None: ...

    @abstractmethod
    async def set_budget(self, manager_id: str, budget: int | float) -> None: ...


class ICollectionRepository(ABC):
    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def clear(self) -> int:
        """Remove every record in the collection. Returns how many were removed."""
        ...

"""
Repository for transient collections that are only ever counted or wiped.
"""

import logging

from repositories.base_repository import BaseRepository
from repositories.interfaces import ICollectionRepository

logger = logging.getLogger("fury_fm.repositories.collection")


class CollectionRepository(BaseRepository, ICollectionRepository):
    """Bulk access to an opaque collection of records."""

    async def count(self) -> int:
        keys = await self.store.fetch_subtree(self.collection, shallow=True)
        if not isinstance(keys, dict):
            return 0
        return len(keys)

    async def clear(self) -> int:
        """
        Delete the whole collection.

        An absent collection is already clear; the delete is still issued
        so the result does not depend on a stale count.
        """
        removed = await self.count()
        await self.store.delete_subtree(self.collection)
        logger.info(f"Cleared {removed} record(s) from '{self.collection}'")
        return removed

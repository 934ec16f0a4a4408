"""
Base repository with common store access.
"""

import logging
from abc import ABC

from infrastructure.store_client import IStoreClient, join_path

logger = logging.getLogger("fury_fm.repositories")


class BaseRepository(ABC):
    """
    Base class for all repositories.

    Holds the store client and the collection path the repository owns.
    """

    collection: str = ""

    def __init__(self, store: IStoreClient):
        """
        Initialize repository with a store client.

        Args:
            store: Connected store client shared by every repository in a run
        """
        self.store = store

    def record_path(self, record_id: str) -> str:
        """Path of a single record inside this repository's collection."""
        return join_path(self.collection, record_id)

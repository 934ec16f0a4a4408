"""
Repository for played match records.
"""

from repositories.collection_repository import CollectionRepository


class MatchRepository(CollectionRepository):
    """Data access for the matches collection."""

    collection = "matches"

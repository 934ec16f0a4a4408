"""
Repository for temporary player transfers (loans).
"""

from repositories.collection_repository import CollectionRepository


class LoanRepository(CollectionRepository):
    """Data access for the loans collection."""

    collection = "loans"

"""
Repository layer for data access abstraction.
"""

from repositories.base_repository import BaseRepository
from repositories.collection_repository import CollectionRepository
from repositories.interfaces import ICollectionRepository, IManagerRepository
from repositories.loan_repository import LoanRepository
from repositories.manager_repository import ManagerRepository
from repositories.match_repository import MatchRepository

__all__ = [
    "BaseRepository",
    "CollectionRepository",
    "ManagerRepository",
    "LoanRepository",
    "MatchRepository",
    "IManagerRepository",
    "ICollectionRepository",
]

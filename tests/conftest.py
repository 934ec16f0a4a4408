"""
Pytest fixtures for tests.

Every test runs against an InMemoryStoreClient seeded with a small league:
three managers, a few loans and a few matches. No network access.
"""

import copy

import pytest

from infrastructure.memory_store import InMemoryStoreClient
from repositories.loan_repository import LoanRepository
from repositories.manager_repository import ManagerRepository
from repositories.match_repository import MatchRepository
from services.budget_service import BudgetService
from services.cleanup_service import CleanupService

TARGET_BUDGET = 900_000_000
"""The budget floor the game shipped with (900M)."""

SAMPLE_DATA = {
    "managers": {
        "alice": {
            "managerName": "Alice",
            "email": "alice@example.com",
            "budget": 500_000_000,
            "points": 12,
            "wins": 3,
            "losses": 1,
            "draws": 3,
            "matchesPlayed": 7,
        },
        "bob": {
            "managerName": "Bob",
            "email": "bob@example.com",
            "budget": 900_000_000,
            "points": 4,
            "wins": 1,
            "losses": 2,
            "draws": 1,
            "matchesPlayed": 4,
        },
        "carol": {
            "email": "carol@example.com",
            "budget": 1_200_000_000,
            "points": 0,
            "wins": 0,
            "losses": 0,
            "draws": 0,
            "matchesPlayed": 0,
        },
    },
    "loans": {
        "loan1": {"from": "alice", "to": "bob", "playerId": "p7"},
        "loan2": {"from": "carol", "to": "alice", "playerId": "p3"},
    },
    "matches": {
        "match1": {"home": "alice", "away": "bob", "score": "2-1"},
        "match2": {"home": "bob", "away": "carol", "score": "0-0"},
        "match3": {"home": "carol", "away": "alice", "score": "1-3"},
    },
}


def make_store(data: dict | None = None) -> InMemoryStoreClient:
    """Build a store that is already connected."""
    store = InMemoryStoreClient(copy.deepcopy(SAMPLE_DATA) if data is None else data)
    store.connected = True
    return store


@pytest.fixture
def store():
    return make_store()


@pytest.fixture
def empty_store():
    return make_store({})


@pytest.fixture
def manager_repo(store):
    return ManagerRepository(store)


@pytest.fixture
def cleanup_service(store):
    return CleanupService(
        manager_repo=ManagerRepository(store),
        loan_repo=LoanRepository(store),
        match_repo=MatchRepository(store),
    )


@pytest.fixture
def budget_service(store):
    return BudgetService(manager_repo=ManagerRepository(store))

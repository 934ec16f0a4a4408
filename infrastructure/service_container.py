"""
Service container for dependency injection and initialization.

Centralizes how a maintenance run wires the store client, repositories and
services, so each script only parses arguments and prints results.

Usage:
    container = ServiceContainer(ServiceConfig.from_env())
    async with container:
        summary = await container.cleanup_service.run_cleanup()
"""

import logging
from dataclasses import dataclass

import config
from infrastructure.realtime_database import RealtimeDatabaseClient, load_service_account
from infrastructure.store_client import IStoreClient
from repositories.loan_repository import LoanRepository
from repositories.manager_repository import ManagerRepository
from repositories.match_repository import MatchRepository
from services.budget_service import BudgetService
from services.cleanup_service import CleanupService

logger = logging.getLogger("fury_fm.infrastructure.container")


@dataclass
class RepositoryContainer:
    """Container for all repositories."""

    manager: ManagerRepository | None = None
    loan: LoanRepository | None = None
    match: MatchRepository | None = None


@dataclass
class ServiceConfig:
    """Configuration for service initialization."""

    database_url: str | None = None
    auth_token: str | None = None
    credentials_path: str | None = None
    timeout_seconds: float = 10.0
    concurrency: int = 1

    @classmethod
    def from_env(cls, concurrency: int | None = None) -> "ServiceConfig":
        """Build from config.py; an explicit concurrency overrides the environment."""
        return cls(
            database_url=config.FIREBASE_DATABASE_URL,
            auth_token=config.FIREBASE_AUTH_TOKEN,
            credentials_path=config.FIREBASE_CREDENTIALS,
            timeout_seconds=config.STORE_TIMEOUT_SECONDS,
            concurrency=concurrency if concurrency is not None else config.MAINTENANCE_CONCURRENCY,
        )


class ServiceContainer:
    """
    Owns the single store session of a run.

    The store client is created from config unless one is injected (tests
    pass an InMemoryStoreClient). `initialize()` connects and wires
    everything; `shutdown()` releases the session.
    """

    def __init__(self, config: ServiceConfig | None = None, store: IStoreClient | None = None):
        self.config = config or ServiceConfig()
        self._store = store
        self._repos = RepositoryContainer()
        self._cleanup_service: CleanupService | None = None
        self._budget_service: BudgetService | None = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _create_store(self) -> IStoreClient:
        if not self.config.database_url:
            raise ValueError("FIREBASE_DATABASE_URL is not set")
        credentials = None
        if self.config.credentials_path:
            credentials = load_service_account(self.config.credentials_path)
            logger.info(f"Using service account {credentials.service_account_email}")
        return RealtimeDatabaseClient(
            database_url=self.config.database_url,
            auth_token=self.config.auth_token,
            timeout_seconds=self.config.timeout_seconds,
            credentials=credentials,
        )

    async def initialize(self) -> None:
        """
        Connect to the store and wire repositories and services.

        Idempotent. Raises StoreConnectionError if the store is unreachable.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        if self._store is None:
            self._store = self._create_store()
        try:
            await self._store.connect()
        except Exception:
            await self._store.close()
            raise

        self._repos.manager = ManagerRepository(self._store)
        self._repos.loan = LoanRepository(self._store)
        self._repos.match = MatchRepository(self._store)

        self._cleanup_service = CleanupService(
            manager_repo=self._repos.manager,
            loan_repo=self._repos.loan,
            match_repo=self._repos.match,
            concurrency=self.config.concurrency,
        )
        self._budget_service = BudgetService(
            manager_repo=self._repos.manager,
            concurrency=self.config.concurrency,
        )

        self._initialized = True
        logger.debug("ServiceContainer initialization complete")

    async def shutdown(self) -> None:
        if self._store is not None:
            await self._store.close()
        self._initialized = False

    async def __aenter__(self) -> "ServiceContainer":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()

    def _require(self, value, name: str):
        if not self._initialized or value is None:
            raise RuntimeError(f"ServiceContainer not initialized; cannot access {name}")
        return value

    @property
    def store(self) -> IStoreClient:
        return self._require(self._store, "store")

    @property
    def manager_repo(self) -> ManagerRepository:
        return self._require(self._repos.manager, "manager_repo")

    @property
    def loan_repo(self) -> LoanRepository:
        return self._require(self._repos.loan, "loan_repo")

    @property
    def match_repo(self) -> MatchRepository:
        return self._require(self._repos.match, "match_repo")

    @property
    def cleanup_service(self) -> CleanupService:
        return self._require(self._cleanup_service, "cleanup_service")

    @property
    def budget_service(self) -> BudgetService:
        return self._require(self._budget_service, "budget_service")

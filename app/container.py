"""Dependency Injection container - initialized at app startup."""

from app.repositories.analytics import AnalyticsStoreRepository, KeyValueSlot
from app.repositories.common.kv import KeyValueRepository
from app.services.analytics.tracking import TrackingService
from settings import DB_PATH


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, slot: KeyValueSlot | None = None, db_path: str = DB_PATH) -> None:
        """Initialize all dependencies. Call once at app startup.

        Pass ``slot`` to substitute the DuckDB-backed storage (tests use an
        in-memory store).
        """
        if self._initialized:
            return

        # Repositories (singletons)
        self._slot = slot if slot is not None else KeyValueRepository(db_path)
        self._store_repo = AnalyticsStoreRepository(self._slot)

        # Services (with injected repos)
        self.tracking = TrackingService(repo=self._store_repo)

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so init() can run again."""
        self.__dict__.clear()
        self._initialized = False


# Global container instance
container = Container()

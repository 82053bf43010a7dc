"""Repositories package - data access layer for the analytics slot."""

from app.repositories.analytics import AnalyticsStoreRepository
from app.repositories.base import BaseRepository
from app.repositories.common import KeyValueRepository, MemoryKeyValueStore
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
)
from app.repositories.errors import (
    StorageError,
    StorageQuotaExceededError,
    StorageUnavailableError,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "KeyValueRepository",
    "MemoryKeyValueStore",
    # Analytics
    "AnalyticsStoreRepository",
    # Errors
    "StorageError",
    "StorageUnavailableError",
    "StorageQuotaExceededError",
]

"""Analytics store repository - load/save of the single persisted blob.

Every operation here is best-effort: storage failures, corrupt blobs and
schema version mismatches are logged and recovered from, never raised.
"""

from typing import Protocol

from loguru import logger
from pydantic import ValidationError

from app.models.analytics import AnalyticsStore, BlobState, LoadResult
from app.repositories.errors import StorageQuotaExceededError
from settings import STORAGE_KEY, STORAGE_VERSION


class KeyValueSlot(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class AnalyticsStoreRepository:
    """Reads and writes the analytics store under one fixed key."""

    def __init__(self, slot: KeyValueSlot, key: str = STORAGE_KEY, version: str = STORAGE_VERSION):
        self._slot = slot
        self._key = key
        self._version = version
        logger.debug("AnalyticsStoreRepository initialized (key={})", key)

    def _empty(self) -> AnalyticsStore:
        return AnalyticsStore(page_views=[], search_queries=[], version=self._version)

    def classify(self, raw: str | None) -> LoadResult:
        """Classify a raw blob as valid, absent or corrupt."""
        if raw is None:
            return LoadResult(BlobState.ABSENT, self._empty())

        try:
            store = AnalyticsStore.model_validate_json(raw)
        except ValidationError as e:
            return LoadResult(BlobState.CORRUPT, self._empty(), f"{e.error_count()} validation errors")

        if store.version != self._version:
            return LoadResult(
                BlobState.CORRUPT,
                self._empty(),
                f"schema version {store.version!r} != {self._version!r}",
            )

        paths = [pv.path for pv in store.page_views]
        if len(paths) != len(set(paths)):
            return LoadResult(BlobState.CORRUPT, self._empty(), "duplicate page view paths")

        return LoadResult(BlobState.VALID, store)

    def load(self) -> AnalyticsStore:
        """Load the store; an empty store on any failure."""
        try:
            raw = self._slot.get(self._key)
        except Exception as e:
            logger.warning("Analytics read failed, using empty store: {}", e)
            return self._empty()

        result = self.classify(raw)
        if result.state is BlobState.CORRUPT:
            logger.warning("Discarding corrupt analytics blob: {}", result.reason)
        return result.store

    def save(self, store: AnalyticsStore) -> bool:
        """Overwrite the persisted blob. Returns False if the write was dropped."""
        try:
            self._slot.set(self._key, store.to_json())
        except StorageQuotaExceededError as e:
            logger.warning("Analytics write dropped: {}", e)
            return False
        except Exception as e:
            logger.warning("Analytics write failed: {}", e)
            return False
        return True

    def clear(self) -> None:
        """Delete the persisted blob."""
        try:
            self._slot.remove(self._key)
        except Exception as e:
            logger.warning("Analytics clear failed: {}", e)
            return
        logger.info("Analytics data cleared")

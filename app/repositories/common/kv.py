"""Key-value repository - the persistent slot backing the analytics blob."""

from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository
from app.repositories.errors import StorageQuotaExceededError, StorageUnavailableError
from settings import DB_PATH, MAX_BLOB_BYTES


def check_quota(value: str, quota: int | None) -> None:
    """Raise if the encoded value is larger than the quota."""
    if quota is None:
        return
    size = len(value.encode("utf-8"))
    if size > quota:
        raise StorageQuotaExceededError(size, quota)


class KeyValueRepository(BaseRepository):
    """String values stored under string keys in DuckDB."""

    def __init__(
        self,
        db_path: str = DB_PATH,
        read_only: bool = False,
        max_bytes: int | None = MAX_BLOB_BYTES,
    ):
        super().__init__(db_path, read_only)
        self._max_bytes = max_bytes

    def get(self, key: str) -> str | None:
        """Stored value, or None if the key is absent."""
        row = self.fetchone("SELECT data FROM kv_store WHERE key = ?", [key])
        if row:
            logger.debug("Slot read: {}", key)
            return row[0]
        return None

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        if self._read_only:
            raise StorageUnavailableError("Cannot write in read-only mode")
        check_quota(value, self._max_bytes)

        self.execute(
            """
            INSERT OR REPLACE INTO kv_store (key, data, updated_at)
            VALUES (?, ?, ?)
            """,
            [key, value, datetime.now()],
        )
        logger.debug("Slot written: {} ({} chars)", key, len(value))

    def remove(self, key: str) -> None:
        """Delete key; missing keys are ignored."""
        if self._read_only:
            raise StorageUnavailableError("Cannot delete in read-only mode")

        self.execute("DELETE FROM kv_store WHERE key = ?", [key])
        logger.debug("Slot removed: {}", key)

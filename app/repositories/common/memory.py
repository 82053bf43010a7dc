"""In-memory key-value store with the same interface as KeyValueRepository."""

from app.repositories.common.kv import check_quota
from app.repositories.errors import StorageUnavailableError


class MemoryKeyValueStore:
    """Dict-backed slot. ``available=False`` simulates blocked storage."""

    def __init__(self, max_bytes: int | None = None, available: bool = True):
        self._data: dict[str, str] = {}
        self._max_bytes = max_bytes
        self.available = available

    def _check(self) -> None:
        if not self.available:
            raise StorageUnavailableError("In-memory storage disabled")

    def get(self, key: str) -> str | None:
        self._check()
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._check()
        check_quota(value, self._max_bytes)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._check()
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

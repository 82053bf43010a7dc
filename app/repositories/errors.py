"""Storage errors raised by key-value backends.

The analytics store repository recovers from all of these; they never reach
callers of the tracking service.
"""


class StorageError(Exception):
    """Base class for key-value slot failures."""

    def __init__(self, message: str = "Storage error"):
        self.message = message
        super().__init__(self.message)


class StorageUnavailableError(StorageError):
    """Persistent storage is disabled, blocked, or cannot be opened."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message)


class StorageQuotaExceededError(StorageError):
    """A write would exceed the slot's size quota."""

    def __init__(self, size: int, quota: int):
        self.size = size
        self.quota = quota
        super().__init__(f"Blob of {size} bytes exceeds quota of {quota} bytes")

"""Common repositories - key-value slot backends."""

from app.repositories.common.kv import KeyValueRepository
from app.repositories.common.memory import MemoryKeyValueStore

__all__ = [
    "KeyValueRepository",
    "MemoryKeyValueStore",
]

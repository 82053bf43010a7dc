"""Common models - base classes and the key-value slot table."""

from app.models.common.base import BaseEntity
from app.models.common.storage import KV_DDL

__all__ = [
    "BaseEntity",
    "KV_DDL",
]

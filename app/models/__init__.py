"""Models package - DDL and entities for all domains."""

from app.models.analytics import (
    AnalyticsStore,
    BlobState,
    LoadResult,
    PageView,
    SearchQuery,
    SearchStats,
)
from app.models.common import KV_DDL, BaseEntity

ALL_DDL = [
    # Common
    KV_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "KV_DDL",
    # Analytics
    "PageView",
    "SearchQuery",
    "AnalyticsStore",
    "BlobState",
    "LoadResult",
    "SearchStats",
    # All DDL
    "ALL_DDL",
]

"""Analytics domain models - events, store aggregate, and computed entities."""

from app.models.analytics.entities import BlobState, LoadResult, SearchStats
from app.models.analytics.events import AnalyticsStore, PageView, SearchQuery

__all__ = [
    "PageView",
    "SearchQuery",
    "AnalyticsStore",
    "BlobState",
    "LoadResult",
    "SearchStats",
]

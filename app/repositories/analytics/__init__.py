"""Analytics repositories."""

from app.repositories.analytics.store import AnalyticsStoreRepository, KeyValueSlot

__all__ = [
    "AnalyticsStoreRepository",
    "KeyValueSlot",
]

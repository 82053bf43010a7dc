"""Analytics services - recorder, queries, tracking facade, auto-tracking."""

from app.services.analytics.auto_tracking import PageViewTracker, SearchInputTracker
from app.services.analytics.queries import AnalyticsQueries
from app.services.analytics.recorder import EventRecorder, normalize_query
from app.services.analytics.tracking import TrackingService

__all__ = [
    "AnalyticsQueries",
    "EventRecorder",
    "PageViewTracker",
    "SearchInputTracker",
    "TrackingService",
    "normalize_query",
]

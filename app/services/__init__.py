"""Services package - service class exports."""

from app.services.analytics import (
    AnalyticsQueries,
    EventRecorder,
    PageViewTracker,
    SearchInputTracker,
    TrackingService,
)

__all__ = [
    "AnalyticsQueries",
    "EventRecorder",
    "PageViewTracker",
    "SearchInputTracker",
    "TrackingService",
]

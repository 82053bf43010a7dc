"""Tracking service - the interface UI collaborators call into.

Every call holds the service lock for its whole load -> mutate -> save (or
load -> derive) sequence, so timer threads and concurrent dashboard sessions
act as one writer at a time over the shared store and connection.
"""

import threading
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

from app.models.analytics import PageView, SearchQuery, SearchStats
from app.repositories.analytics import AnalyticsStoreRepository
from app.services.analytics.queries import AnalyticsQueries
from app.services.analytics.recorder import EventRecorder
from settings import DEFAULT_QUERY_LIMIT, DEFAULT_TOP_PAGES_LIMIT

T = TypeVar("T")


class TrackingService:
    """Sole owner of the analytics store: recording, queries and management."""

    def __init__(self, repo: AnalyticsStoreRepository, recorder: EventRecorder | None = None):
        self._repo = repo
        self._recorder = recorder or EventRecorder(repo)
        self._queries = AnalyticsQueries(repo)
        self._lock = threading.Lock()
        logger.debug("TrackingService initialized")

    def _best_effort(self, action: str, fn: Callable[[], T], default: T) -> T:
        """Run fn under the lock, return default on failure. Analytics never interrupts the host."""
        with self._lock:
            try:
                return fn()
            except Exception as e:
                logger.warning("Analytics {} failed: {}", action, e)
                return default

    # ========== Tracking ==========

    def track_page_view(self, path: str | None) -> None:
        self._best_effort("page view", lambda: self._recorder.record_page_view(path), None)

    def track_search_query(self, query: str | None, result_count: int) -> None:
        self._best_effort("search", lambda: self._recorder.record_search_query(query, result_count), None)

    # ========== Queries ==========

    def get_top_pages(self, limit: int = DEFAULT_TOP_PAGES_LIMIT) -> list[PageView]:
        return self._best_effort("top pages", lambda: self._queries.top_pages(limit), [])

    def get_zero_result_queries(self, limit: int = DEFAULT_QUERY_LIMIT) -> list[SearchQuery]:
        return self._best_effort("zero-result queries", lambda: self._queries.zero_result_queries(limit), [])

    def get_recent_searches(self, limit: int = DEFAULT_QUERY_LIMIT) -> list[SearchQuery]:
        return self._best_effort("recent searches", lambda: self._queries.recent_searches(limit), [])

    def get_search_stats(self) -> SearchStats:
        return self._best_effort("search stats", self._queries.search_stats, SearchStats())

    # ========== Management ==========

    def clear_analytics_data(self) -> None:
        """Delete all stored analytics."""
        with self._lock:
            self._repo.clear()

    def export_analytics_data(self) -> str:
        """Full store as indented JSON. Errors propagate to the caller."""
        with self._lock:
            data = self._queries.export_snapshot()
        logger.debug("Built analytics snapshot ({} chars)", len(data))
        return data

"""Event recorder - merges page views and appends search queries."""

import time
from collections.abc import Callable
from operator import attrgetter
from typing import TypeVar

from loguru import logger

from app.models.analytics import PageView, SearchQuery
from app.repositories.analytics import AnalyticsStoreRepository
from settings import MAX_PAGE_VIEWS, MAX_SEARCH_QUERIES

T = TypeVar("T")


def now_ms() -> int:
    """Wall clock in epoch milliseconds."""
    return int(time.time() * 1000)


def normalize_query(query: str | None) -> str:
    """Trim and case-fold search text ("Straße" and "STRASSE" both become "strasse")."""
    if not query:
        return ""
    return query.strip().casefold()


def evict_oldest(records: list[T], limit: int, timestamp: Callable[[T], int]) -> list[T]:
    """Keep the `limit` most recent records; a no-op within the bound."""
    if len(records) <= limit:
        return records
    return sorted(records, key=timestamp)[-limit:] if limit > 0 else []


class EventRecorder:
    """Records page views (upsert by path) and searches (append only)."""

    def __init__(
        self,
        repo: AnalyticsStoreRepository,
        clock: Callable[[], int] = now_ms,
        max_page_views: int = MAX_PAGE_VIEWS,
        max_search_queries: int = MAX_SEARCH_QUERIES,
    ):
        self._repo = repo
        self._clock = clock
        self._max_page_views = max_page_views
        self._max_search_queries = max_search_queries

    def record_page_view(self, path: str | None) -> None:
        if not path:
            return

        store = self._repo.load()
        now = self._clock()

        for i, pv in enumerate(store.page_views):
            if pv.path == path:
                store.page_views[i] = PageView(path=path, last_seen_at=now, view_count=pv.view_count + 1)
                break
        else:
            store.page_views.append(PageView(path=path, last_seen_at=now, view_count=1))

        before = len(store.page_views)
        store.page_views = evict_oldest(store.page_views, self._max_page_views, attrgetter("last_seen_at"))
        if len(store.page_views) < before:
            logger.debug("Evicted {} page views", before - len(store.page_views))

        self._repo.save(store)

    def record_search_query(self, query: str | None, result_count: int) -> None:
        normalized = normalize_query(query)
        if not normalized:
            return

        count = max(int(result_count), 0)
        store = self._repo.load()
        store.search_queries.append(
            SearchQuery(
                query=normalized,
                occurred_at=self._clock(),
                result_count=count,
                has_results=count > 0,
            )
        )

        before = len(store.search_queries)
        store.search_queries = evict_oldest(
            store.search_queries, self._max_search_queries, attrgetter("occurred_at")
        )
        if len(store.search_queries) < before:
            logger.debug("Evicted {} search queries", before - len(store.search_queries))

        self._repo.save(store)

"""Analytics API views - thin layer over the tracking service."""

import time

from loguru import logger

from app.container import container
from settings import DEFAULT_QUERY_LIMIT, DEFAULT_TOP_PAGES_LIMIT
from web.api.errors import ExportError, validate_limit

from .schemas import (
    ExportResponse,
    PageViewItem,
    SearchesResponse,
    SearchItem,
    SearchStatsResponse,
    TopPagesResponse,
)

EXPORT_MIME_TYPE = "application/json"


def _search_items(searches) -> list[SearchItem]:
    return [
        SearchItem(
            query=s.query,
            result_count=s.result_count,
            has_results=s.has_results,
            occurred_at=s.occurred_at,
        )
        for s in searches
    ]


def get_top_pages(limit: int = DEFAULT_TOP_PAGES_LIMIT) -> TopPagesResponse:
    """Most viewed pages."""
    validate_limit(limit)
    pages = container.tracking.get_top_pages(limit)

    items = [PageViewItem(path=p.path, view_count=p.view_count, last_seen_at=p.last_seen_at) for p in pages]
    return TopPagesResponse(items=items)


def get_recent_searches(limit: int = DEFAULT_QUERY_LIMIT) -> SearchesResponse:
    """Most recent searches."""
    validate_limit(limit)
    return SearchesResponse(items=_search_items(container.tracking.get_recent_searches(limit)))


def get_zero_result_queries(limit: int = DEFAULT_QUERY_LIMIT) -> SearchesResponse:
    """Most recent searches that found nothing."""
    validate_limit(limit)
    return SearchesResponse(items=_search_items(container.tracking.get_zero_result_queries(limit)))


def get_search_stats() -> SearchStatsResponse:
    """Search statistics."""
    stats = container.tracking.get_search_stats()
    return SearchStatsResponse(**stats.to_dict())


def clear_data() -> None:
    """Delete all stored analytics."""
    container.tracking.clear_analytics_data()


def export_data() -> ExportResponse:
    """Build the export download: analytics-<epoch ms>.json."""
    try:
        content = container.tracking.export_analytics_data()
        filename = f"analytics-{int(time.time() * 1000)}.json"
        return ExportResponse(filename=filename, mime_type=EXPORT_MIME_TYPE, content=content)
    except Exception as e:
        logger.error("Export failed: {}", e)
        raise ExportError() from e

"""Analytics API."""

from web.api.analytics.views import (
    clear_data,
    export_data,
    get_recent_searches,
    get_search_stats,
    get_top_pages,
    get_zero_result_queries,
)

__all__ = [
    "get_top_pages",
    "get_recent_searches",
    "get_zero_result_queries",
    "get_search_stats",
    "clear_data",
    "export_data",
]

"""Query engine - read-only views over the stored events."""

import math

from loguru import logger

from app.models.analytics import PageView, SearchQuery, SearchStats
from app.repositories.analytics import AnalyticsStoreRepository


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with halves going up (2.25 -> 2.3), unlike round()."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


class AnalyticsQueries:
    """Top-N, recency and summary queries. Never mutates the store."""

    def __init__(self, repo: AnalyticsStoreRepository):
        self._repo = repo

    def top_pages(self, limit: int) -> list[PageView]:
        """Most viewed pages; ties go to the most recently viewed, then path."""
        if limit <= 0:
            return []
        pages = self._repo.load().page_views
        ranked = sorted(pages, key=lambda pv: (-pv.view_count, -pv.last_seen_at, pv.path))
        return ranked[:limit]

    def recent_searches(self, limit: int) -> list[SearchQuery]:
        if limit <= 0:
            return []
        searches = self._repo.load().search_queries
        return sorted(searches, key=lambda sq: sq.occurred_at, reverse=True)[:limit]

    def zero_result_queries(self, limit: int) -> list[SearchQuery]:
        if limit <= 0:
            return []
        misses = [sq for sq in self._repo.load().search_queries if not sq.has_results]
        return sorted(misses, key=lambda sq: sq.occurred_at, reverse=True)[:limit]

    def search_stats(self) -> SearchStats:
        searches = self._repo.load().search_queries
        if not searches:
            return SearchStats()

        total = len(searches)
        average = sum(sq.result_count for sq in searches) / total
        stats = SearchStats(
            total_searches=total,
            unique_queries=len({sq.query for sq in searches}),
            zero_result_count=sum(1 for sq in searches if not sq.has_results),
            average_result_count=round_half_up(average, 1),
        )
        logger.debug("Search stats: {}", stats)
        return stats

    def export_snapshot(self) -> str:
        """Indented JSON of the full store, wire field names."""
        return self._repo.load().to_json(indent=2)

"""Analytics domain entities - blob classification and computed stats."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.analytics.events import AnalyticsStore
from app.models.common import BaseEntity


class BlobState(StrEnum):
    """Classification of a persisted blob before any field access."""

    VALID = "valid"
    ABSENT = "absent"
    CORRUPT = "corrupt"


@dataclass
class LoadResult:
    """Outcome of classifying a raw blob."""

    state: BlobState
    store: AnalyticsStore
    reason: str | None = None


@dataclass
class SearchStats(BaseEntity):
    """Summary statistics over all recorded searches."""

    total_searches: int = 0
    unique_queries: int = 0
    zero_result_count: int = 0
    average_result_count: float = 0.0

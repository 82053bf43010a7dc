"""Analytics API response schemas."""

from pydantic import BaseModel


class PageViewItem(BaseModel):
    """Page view row."""

    path: str
    view_count: int
    last_seen_at: int


class TopPagesResponse(BaseModel):
    """Top pages response."""

    items: list[PageViewItem]


class SearchItem(BaseModel):
    """Search event row."""

    query: str
    result_count: int
    has_results: bool
    occurred_at: int


class SearchesResponse(BaseModel):
    """Search listing response."""

    items: list[SearchItem]


class SearchStatsResponse(BaseModel):
    """Search statistics response."""

    total_searches: int
    unique_queries: int
    zero_result_count: int
    average_result_count: float


class ExportResponse(BaseModel):
    """Downloadable export artifact."""

    filename: str
    mime_type: str
    content: str

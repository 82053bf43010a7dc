"""Analytics event records and the persisted store aggregate.

Field aliases are the names used in the persisted blob and in exports, so a
store round-trips through ``model_dump_json(by_alias=True)`` /
``model_validate_json``.
"""

from pydantic import BaseModel, Field, model_validator

from settings import STORAGE_VERSION


class PageView(BaseModel):
    """One record per visited path."""

    path: str = Field(min_length=1)
    last_seen_at: int = Field(alias="timestamp")
    view_count: int = Field(alias="viewCount", ge=1)

    class Config:
        populate_by_name = True


class SearchQuery(BaseModel):
    """A single search attempt (normalized query text)."""

    query: str = Field(min_length=1)
    occurred_at: int = Field(alias="timestamp")
    result_count: int = Field(alias="resultCount", ge=0)
    has_results: bool = Field(alias="hasResults", default=False)

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _derive_has_results(self) -> "SearchQuery":
        # Redundant field, always recomputed from result_count
        self.has_results = self.result_count > 0
        return self


class AnalyticsStore(BaseModel):
    """Persisted aggregate: page views, search queries and schema version."""

    page_views: list[PageView] = Field(alias="pageViews")
    search_queries: list[SearchQuery] = Field(alias="searchQueries")
    version: str = Field(min_length=1)

    class Config:
        populate_by_name = True

    @classmethod
    def empty(cls) -> "AnalyticsStore":
        """Fresh store at the current schema version."""
        return cls(page_views=[], search_queries=[], version=STORAGE_VERSION)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with wire field names."""
        return self.model_dump_json(by_alias=True, indent=indent)

"""Tests for the tracking service contract."""

import pytest

from app.models.analytics import SearchStats
from app.repositories.analytics import AnalyticsStoreRepository
from app.repositories.common import MemoryKeyValueStore
from app.services.analytics import TrackingService


class ExplodingSlot:
    def get(self, key):
        raise OSError("storage blocked")

    def set(self, key, value):
        raise OSError("storage blocked")

    def remove(self, key):
        raise OSError("storage blocked")


@pytest.fixture(params=["unavailable", "exploding", "quota"])
def broken_tracking(request):
    slots = {
        "unavailable": MemoryKeyValueStore(available=False),
        "exploding": ExplodingSlot(),
        "quota": MemoryKeyValueStore(max_bytes=1),
    }
    return TrackingService(AnalyticsStoreRepository(slots[request.param]))


class TestBestEffort:
    def test_no_errors_on_storage_failure(self, broken_tracking):
        broken_tracking.track_page_view("/docs/intro")
        broken_tracking.track_search_query("vlan", 0)
        broken_tracking.clear_analytics_data()

        assert broken_tracking.get_top_pages() == []
        assert broken_tracking.get_recent_searches() == []
        assert broken_tracking.get_zero_result_queries() == []
        assert broken_tracking.get_search_stats() == SearchStats()

    def test_bad_result_count_swallowed(self, tracking):
        tracking.track_search_query("vlan", None)
        assert tracking.get_recent_searches() == []


class TestTracking:
    def test_idempotent_page_views(self, tracking):
        for _ in range(7):
            tracking.track_page_view("/docs/poe")
        pages = tracking.get_top_pages()
        assert len(pages) == 1
        assert pages[0].view_count == 7

    def test_normalization(self, tracking):
        tracking.track_search_query("  VLAN  ", 1)
        assert tracking.get_recent_searches()[0].query == "vlan"

    def test_default_limits(self, tracking):
        for i in range(25):
            tracking.track_page_view(f"/p{i}")
            tracking.track_search_query(f"q{i}", 0)

        assert len(tracking.get_top_pages()) == 10
        assert len(tracking.get_recent_searches()) == 20
        assert len(tracking.get_zero_result_queries()) == 20

    def test_clear(self, tracking):
        tracking.track_page_view("/a")
        tracking.track_search_query("vlan", 0)
        tracking.clear_analytics_data()

        assert tracking.get_top_pages() == []
        assert tracking.get_recent_searches() == []
        assert tracking.get_zero_result_queries() == []
        assert tracking.get_search_stats().total_searches == 0

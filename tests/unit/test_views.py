"""Tests for the analytics API views."""

import json
import re

import pytest

from app.container import container
from app.repositories.common import MemoryKeyValueStore
from web.api import analytics
from web.api.errors import ExportError, ValidationError


@pytest.fixture(autouse=True)
def memory_container():
    container.reset()
    container.init(slot=MemoryKeyValueStore())
    yield
    container.reset()


class TestListings:
    def test_top_pages(self):
        for path in ["/a", "/b", "/b"]:
            container.tracking.track_page_view(path)

        resp = analytics.get_top_pages(5)
        assert [(p.path, p.view_count) for p in resp.items] == [("/b", 2), ("/a", 1)]

    def test_searches(self):
        container.tracking.track_search_query("vlan", 0)
        container.tracking.track_search_query("poe", 3)

        assert {s.query for s in analytics.get_recent_searches().items} == {"poe", "vlan"}
        assert [s.query for s in analytics.get_zero_result_queries().items] == ["vlan"]

    def test_stats(self):
        container.tracking.track_search_query("vlan", 0)
        resp = analytics.get_search_stats()
        assert resp.total_searches == 1
        assert resp.zero_result_count == 1
        assert resp.average_result_count == 0

    @pytest.mark.parametrize("limit", [0, -5, 100_000])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValidationError):
            analytics.get_top_pages(limit)

    def test_clear(self):
        container.tracking.track_page_view("/a")
        analytics.clear_data()
        assert analytics.get_top_pages().items == []


class TestExport:
    def test_artifact(self):
        container.tracking.track_page_view("/a")
        export = analytics.export_data()

        assert re.fullmatch(r"analytics-\d+\.json", export.filename)
        assert export.mime_type == "application/json"
        assert json.loads(export.content)["pageViews"][0]["path"] == "/a"

    def test_failure_raises_export_error(self, monkeypatch):
        def boom():
            raise RuntimeError("serialization failed")

        monkeypatch.setattr(container.tracking, "export_analytics_data", boom)
        with pytest.raises(ExportError):
            analytics.export_data()

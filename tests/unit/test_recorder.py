"""Tests for the event recorder."""

from app.services.analytics import EventRecorder, normalize_query
from app.services.analytics.recorder import evict_oldest


class TestPageViews:
    def test_repeated_views_single_record(self, recorder, repo):
        for _ in range(5):
            recorder.record_page_view("/docs/intro")

        views = repo.load().page_views
        assert len(views) == 1
        assert views[0].view_count == 5

    def test_timestamp_updated(self, recorder, repo, clock):
        recorder.record_page_view("/a")
        first = repo.load().page_views[0].last_seen_at
        recorder.record_page_view("/a")
        assert repo.load().page_views[0].last_seen_at > first

    def test_distinct_paths(self, recorder, repo):
        recorder.record_page_view("/a")
        recorder.record_page_view("/b")
        recorder.record_page_view("/a")
        counts = {pv.path: pv.view_count for pv in repo.load().page_views}
        assert counts == {"/a": 2, "/b": 1}

    def test_empty_path_ignored(self, recorder, repo):
        recorder.record_page_view("")
        recorder.record_page_view(None)
        assert repo.load().page_views == []


class TestSearchQueries:
    def test_normalized(self, recorder, repo):
        recorder.record_search_query("  VLAN  ", 1)
        assert repo.load().search_queries[0].query == "vlan"

    def test_append_only(self, recorder, repo):
        recorder.record_search_query("poe", 3)
        recorder.record_search_query("POE", 3)
        queries = repo.load().search_queries
        assert [q.query for q in queries] == ["poe", "poe"]

    def test_has_results(self, recorder, repo):
        recorder.record_search_query("vlan", 0)
        recorder.record_search_query("poe", 2)
        flags = [q.has_results for q in repo.load().search_queries]
        assert flags == [False, True]

    def test_blank_ignored(self, recorder, repo):
        recorder.record_search_query("   ", 4)
        recorder.record_search_query("", 4)
        recorder.record_search_query(None, 4)
        assert repo.load().search_queries == []

    def test_negative_count_clamped(self, recorder, repo):
        recorder.record_search_query("vlan", -3)
        sq = repo.load().search_queries[0]
        assert sq.result_count == 0
        assert sq.has_results is False


class TestEviction:
    def test_page_view_bound(self, repo, clock):
        recorder = EventRecorder(repo, clock=clock, max_page_views=3)
        for i in range(10):
            recorder.record_page_view(f"/p{i}")
            assert len(repo.load().page_views) <= 3

        assert sorted(pv.path for pv in repo.load().page_views) == ["/p7", "/p8", "/p9"]

    def test_revisited_page_survives(self, repo, clock):
        recorder = EventRecorder(repo, clock=clock, max_page_views=2)
        recorder.record_page_view("/old")
        recorder.record_page_view("/mid")
        recorder.record_page_view("/old")
        recorder.record_page_view("/new")

        assert sorted(pv.path for pv in repo.load().page_views) == ["/new", "/old"]

    def test_search_bound_keeps_most_recent(self, repo, clock):
        recorder = EventRecorder(repo, clock=clock, max_search_queries=4)
        for i in range(9):
            recorder.record_search_query(f"q{i}", i)

        queries = repo.load().search_queries
        assert len(queries) == 4
        assert sorted(q.query for q in queries) == ["q5", "q6", "q7", "q8"]

    def test_default_bounds(self, recorder, repo):
        for i in range(1005):
            recorder.record_page_view(f"/p{i}")
        for i in range(505):
            recorder.record_search_query(f"q{i}", 1)

        store = repo.load()
        assert len(store.page_views) == 1000
        assert len(store.search_queries) == 500
        assert "/p0" not in {pv.path for pv in store.page_views}
        assert "/p1004" in {pv.path for pv in store.page_views}


class TestHelpers:
    def test_normalize_query(self):
        assert normalize_query("  Hello World ") == "hello world"
        assert normalize_query(None) == ""

    def test_normalize_query_casefolds(self):
        assert normalize_query(" Straße ") == "strasse"
        assert normalize_query("STRASSE") == "strasse"

    def test_evict_oldest(self):
        records = [5, 1, 4, 2, 3]
        assert evict_oldest(records, 3, lambda x: x) == [3, 4, 5]
        assert evict_oldest(records, 10, lambda x: x) is records

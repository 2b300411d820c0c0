"""Tests for the directory controller."""

from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from meetfinder.core.state import FilterCategory
from meetfinder.directory import Directory, RenderMode


@pytest.fixture
def payload():
    return [
        {"id": "1", "name": "Monday Video", "day": "Monday", "time": "19:00", "formats": ["Video"]},
        {"id": "2", "name": "Tuesday Phone", "day": "Tuesday", "time": "07:30", "formats": ["Phone"]},
        {"id": "3", "name": "Monday Phone", "day": "Monday", "time": "12:00", "formats": ["Phone"]},
    ]


@pytest.fixture
def source(payload):
    source = MagicMock()
    source.fetch.return_value = payload
    return source


@pytest.fixture
def reporter():
    return MagicMock()


@pytest.fixture
def store():
    return MagicMock()


@pytest.fixture
def directory(source, reporter, store):
    d = Directory(source, reporter, query_store=store, page_size=2, as_of=date(2025, 1, 15))
    d.start()
    return d


class TestStart:
    def test_loading_before_start(self, source, reporter):
        d = Directory(source, reporter, page_size=2)
        assert d.loading is True
        assert d.render().mode is RenderMode.LOADING
        source.fetch.assert_not_called()

    def test_start_loads_catalog(self, source, reporter):
        d = Directory(source, reporter, page_size=2)
        assert d.start() is True
        assert d.loading is False
        assert len(d.state.meetings) == 3
        reporter.capture_exception.assert_not_called()

    def test_start_fetches_once(self, source, reporter):
        d = Directory(source, reporter, page_size=2)
        d.start()
        assert d.start() is True
        source.fetch.assert_called_once()

    def test_fetch_failure_stays_loading(self, source, reporter):
        error = requests.ConnectionError("offline")
        source.fetch.side_effect = error
        d = Directory(source, reporter, page_size=2)

        assert d.start() is False
        assert d.loading is True
        assert d.render().mode is RenderMode.LOADING
        reporter.capture_exception.assert_called_once_with(error)

    def test_failure_is_not_retried(self, source, reporter):
        source.fetch.side_effect = ValueError("bad json")
        d = Directory(source, reporter, page_size=2)
        d.start()
        assert d.start() is False
        source.fetch.assert_called_once()
        reporter.capture_exception.assert_called_once()

    def test_unusable_payload_reported(self, source, reporter):
        source.fetch.return_value = "oops"
        d = Directory(source, reporter, page_size=2)
        assert d.start() is False
        reporter.capture_exception.assert_called_once()


class TestRender:
    def test_paginated_results(self, directory):
        view = directory.render()
        assert view.mode is RenderMode.RESULTS
        assert [m.id for m in view.meetings] == ["1", "2"]
        assert view.total == 3
        assert view.has_more is True
        assert view.tags == []

    def test_and_across_categories(self, directory):
        directory.toggle_tag("Days", "Monday", True)
        directory.toggle_tag("Formats", "Phone", True)
        view = directory.render()
        assert [m.id for m in view.meetings] == ["3"]
        assert view.tags == ["Monday", "Phone"]

    def test_switching_day(self, directory):
        directory.toggle_tag(FilterCategory.DAYS, "Monday", True)
        directory.toggle_tag(FilterCategory.DAYS, "Tuesday", True)
        view = directory.render()
        assert view.tags == ["Tuesday"]
        assert [m.id for m in view.meetings] == ["2"]

    def test_no_results_branch(self, directory):
        directory.toggle_tag("Days", "Tuesday", True)
        directory.toggle_tag("Formats", "Video", True)
        view = directory.render()
        assert view.mode is RenderMode.NO_RESULTS
        assert view.meetings == []

    def test_search(self, directory):
        directory.set_search(["monday", " ", "video"])
        assert directory.state.search == ("monday", "video")
        assert [m.id for m in directory.render().meetings] == ["1"]

    def test_malformed_timezone_does_not_break_render(self, source, reporter, payload):
        payload.append({"id": "4", "name": "Bad Zone", "day": "Monday", "time": "19:00", "timezone": 5})
        d = Directory(source, reporter, page_size=10, as_of=date(2025, 1, 15))
        d.start()
        d.toggle_tag("Days", "Monday", True)
        d.set_timezone("Europe/London")
        view = d.render()
        assert [m.id for m in view.meetings] == ["1", "3"]

    def test_query_mirrored_on_render(self, directory, store):
        directory.toggle_tag("Days", "Monday", True)
        view = directory.render()
        assert view.query == "days=Monday"
        store.set_query.assert_called_with("days=Monday")

    def test_query_not_mirrored_while_loading(self, source, reporter, store):
        d = Directory(source, reporter, query_store=store, page_size=2)
        d.render()
        store.set_query.assert_not_called()


class TestUpdates:
    def test_toggle_publishes_new_state(self, directory):
        before = directory.state
        directory.toggle_tag("Days", "Monday", True)
        assert directory.state is not before
        assert not any(t.checked for t in before.filters["Days"])

    def test_unknown_toggle_changes_nothing(self, directory):
        before = directory.state.filters
        directory.toggle_tag("days", "Monday", True)
        assert directory.state.filters == before

    def test_load_more(self, directory):
        assert directory.load_more() is True
        assert directory.state.limit == 4
        view = directory.render()
        assert len(view.meetings) == 3
        assert view.has_more is False

    def test_load_more_stops_when_everything_shown(self, directory):
        directory.load_more()
        assert directory.load_more() is False
        assert directory.state.limit == 4

    def test_limit_survives_filter_changes(self, directory):
        directory.load_more()
        directory.toggle_tag("Formats", "Phone", True)
        directory.set_search(["monday"])
        directory.set_timezone("Europe/London")
        assert directory.state.limit == 4

    def test_load_more_ignored_while_loading(self, source, reporter):
        d = Directory(source, reporter, page_size=2)
        assert d.load_more() is False
        assert d.state.limit == 2

    def test_apply_query(self, directory):
        directory.apply_query("formats=phone&search=tuesday")
        assert [m.id for m in directory.render().meetings] == ["2"]

    def test_set_timezone_strips(self, directory):
        directory.set_timezone("  UTC ")
        assert directory.state.timezone == "UTC"

"""Tests for the HTTP catalog, error reporter and query store adapters."""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from meetfinder.adapters.http_catalog import HttpCatalogSource
from meetfinder.adapters.log_reporter import LoggingErrorReporter
from meetfinder.adapters.query_file import FileQueryStore
from meetfinder.core.catalog import CatalogError


@pytest.fixture
def session():
    session = MagicMock()
    session.get.return_value.json.return_value = [{"name": "Meeting"}]
    return session


class TestHttpCatalogSource:
    def test_fetch_returns_json(self, session):
        source = HttpCatalogSource("https://example.org/meetings.json", timeout=5, session=session)
        assert source.fetch() == [{"name": "Meeting"}]

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == "https://example.org/meetings.json"
        assert kwargs["timeout"] == 5

    def test_http_error_propagates(self, session):
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        source = HttpCatalogSource("https://example.org/meetings.json", session=session)
        with pytest.raises(requests.HTTPError):
            source.fetch()

    def test_bad_json_propagates(self, session):
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        source = HttpCatalogSource("https://example.org/meetings.json", session=session)
        with pytest.raises(ValueError):
            source.fetch()

    def test_missing_url(self, session):
        source = HttpCatalogSource("", session=session)
        with pytest.raises(CatalogError):
            source.fetch()
        session.get.assert_not_called()


class TestLoggingErrorReporter:
    def test_logs_with_traceback(self, caplog):
        reporter = LoggingErrorReporter(environment="staging")
        try:
            raise requests.ConnectionError("offline")
        except requests.ConnectionError as e:
            error = e

        with caplog.at_level(logging.ERROR):
            reporter.capture_exception(error)

        record = caplog.records[-1]
        assert "[staging] ConnectionError: offline" in record.getMessage()
        assert record.exc_info is not None


class TestFileQueryStore:
    def test_creates_parent(self, tmp_path):
        store = FileQueryStore(tmp_path / "data" / "last_query")
        assert (tmp_path / "data").is_dir()
        assert store.get_query() is None

    def test_set_and_get(self, tmp_path):
        store = FileQueryStore(tmp_path / "last_query")
        store.set_query("days=Monday")
        store.set_query("days=Tuesday")
        assert store.get_query() == "days=Tuesday"

    def test_clear(self, tmp_path):
        store = FileQueryStore(tmp_path / "last_query")
        store.set_query("tz=UTC")
        store.clear()
        assert store.get_query() is None
        store.clear()

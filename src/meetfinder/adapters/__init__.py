"""Adapters - I/O implementations of ports."""

from .http_catalog import HttpCatalogSource
from .log_reporter import LoggingErrorReporter
from .query_file import FileQueryStore

__all__ = [
    "HttpCatalogSource",
    "LoggingErrorReporter",
    "FileQueryStore",
]

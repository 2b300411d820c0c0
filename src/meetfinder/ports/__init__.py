"""Ports - interfaces/protocols for external dependencies."""

from .catalog_source import CatalogSource
from .error_reporter import ErrorReporter
from .query_store import QueryStore

__all__ = [
    "CatalogSource",
    "ErrorReporter",
    "QueryStore",
]

"""Query storage interface."""

from typing import Protocol


class QueryStore(Protocol):
    """Interface for mirroring the current view's query string."""

    def set_query(self, query: str) -> None:
        """Record the query for the current view."""
        ...

    def get_query(self) -> str | None:
        """The last recorded query. Returns None if none was recorded."""
        ...

"""Catalog source interface."""

from typing import Protocol


class CatalogSource(Protocol):
    """Interface for fetching the raw meeting catalog."""

    def fetch(self) -> object:
        """Fetch the decoded catalog payload. Raises on any failure."""
        ...

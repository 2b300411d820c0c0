"""HTTP catalog adapter - fetches the meeting catalog as JSON."""

import logging

import requests

from meetfinder.core.catalog import CatalogError

logger = logging.getLogger(__name__)


class HttpCatalogSource:
    """
    Fetches the catalog with a single GET.

    Implements CatalogSource protocol. No retries; a failure is raised to the
    caller, which decides how to report it.
    """

    def __init__(self, url: str, timeout: float = 10, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self) -> object:
        """Fetch and decode the catalog."""
        if not self.url:
            raise CatalogError("No data URL configured. Set DATA_URL in config/meetfinder.conf")

        logger.debug(f"Fetching catalog from {self.url}")
        resp = self._session.get(
            self.url,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()

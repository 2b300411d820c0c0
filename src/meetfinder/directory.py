"""Directory controller - owns the filter state and renders views of it.

Every update builds a new State from the current one and publishes it; the
pure functions in meetfinder.core do the actual work.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum

from .core.catalog import load
from .core.filter import filter_meetings
from .core.meeting import Meeting
from .core.pagination import has_more, load_more, visible
from .core.query import apply_query, encode_query
from .core.state import FilterCategory, State, initial_state
from .core.tags import active_tags, toggle_tag
from .ports import CatalogSource, ErrorReporter, QueryStore

logger = logging.getLogger(__name__)


class RenderMode(Enum):
    """Which branch of the view to show."""

    LOADING = "loading"
    NO_RESULTS = "no_results"
    RESULTS = "results"


@dataclass
class View:
    """Everything needed to display the directory once."""

    mode: RenderMode
    tags: list[str] = field(default_factory=list)
    meetings: list[Meeting] = field(default_factory=list)
    total: int = 0
    has_more: bool = False
    query: str = ""


class Directory:
    """
    Single owner of the directory State.

    The catalog is fetched once by start(). Until it succeeds the directory
    stays loading; there is no way back to loading afterwards.
    """

    def __init__(
        self,
        source: CatalogSource,
        reporter: ErrorReporter,
        query_store: QueryStore | None = None,
        page_size: int = 10,
        as_of: date | None = None,
    ):
        self.source = source
        self.reporter = reporter
        self.query_store = query_store
        self.page_size = page_size
        self.as_of = as_of
        self.state = initial_state(page_size)
        self._started = False

    @property
    def loading(self) -> bool:
        return self.state.loading

    def _publish(self, state: State) -> None:
        self.state = state

    def start(self) -> bool:
        """
        Fetch and load the catalog. Returns True once loaded.

        Only the first call fetches. A failure is reported and leaves the
        directory loading.
        """
        if self._started:
            return not self.state.loading
        self._started = True

        try:
            payload = self.source.fetch()
            state = load(payload, self.page_size)
        except Exception as e:
            logger.warning(f"Failed to load meeting catalog: {e}")
            self.reporter.capture_exception(e)
            return False

        logger.info(f"Loaded {len(state.meetings)} meetings")
        self._publish(state)
        return True

    def toggle_tag(self, category: FilterCategory | str, value: str, checked: bool) -> None:
        """Check or uncheck a tag, applying the category's exclusivity."""
        filters = toggle_tag(self.state.filters, category, value, checked)
        self._publish(replace(self.state, filters=filters))

    def set_search(self, search: list[str] | tuple[str, ...]) -> None:
        tokens = tuple(t.strip() for t in search if t.strip())
        self._publish(replace(self.state, search=tokens))

    def set_timezone(self, timezone: str) -> None:
        self._publish(replace(self.state, timezone=timezone.strip()))

    def apply_query(self, query: str) -> None:
        """Restore tags, search and timezone from an encoded query."""
        if self.state.loading:
            logger.debug("Ignoring query while loading")
            return
        self._publish(apply_query(self.state, query))

    def filtered(self) -> list[Meeting]:
        """Meetings matching the current selection, before pagination."""
        return filter_meetings(self.state, active_tags(self.state.filters), self.as_of)

    def load_more(self) -> bool:
        """Show another page if any filtered meetings are hidden."""
        if self.state.loading or not has_more(self.state, self.filtered()):
            return False
        self._publish(load_more(self.state, self.page_size))
        return True

    def render(self) -> View:
        """
        Derive the view from the current state.

        Once loaded, the query string is mirrored to the query store on
        every render.
        """
        if self.state.loading:
            return View(mode=RenderMode.LOADING)

        query = encode_query(self.state)
        if self.query_store is not None:
            self.query_store.set_query(query)

        tags = active_tags(self.state.filters)
        filtered = filter_meetings(self.state, tags, self.as_of)
        if not filtered:
            return View(mode=RenderMode.NO_RESULTS, tags=tags, query=query)

        return View(
            mode=RenderMode.RESULTS,
            tags=tags,
            meetings=visible(self.state, filtered),
            total=len(filtered),
            has_more=has_more(self.state, filtered),
            query=query,
        )

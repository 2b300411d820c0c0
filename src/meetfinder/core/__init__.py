"""Functional core - pure business logic with no I/O."""

from .meeting import Meeting, localize, time_bucket
from .state import FilterCategory, Filters, MeetingTag, State, initial_state
from .catalog import CatalogError, load
from .tags import active_tags, toggle_tag
from .filter import filter_meetings
from .pagination import has_more, load_more, visible
from .query import apply_query, encode_query

__all__ = [
    # Meetings
    "Meeting",
    "localize",
    "time_bucket",
    # State
    "FilterCategory",
    "Filters",
    "MeetingTag",
    "State",
    "initial_state",
    # Catalog
    "CatalogError",
    "load",
    # Tags
    "active_tags",
    "toggle_tag",
    # Filtering
    "filter_meetings",
    # Pagination
    "has_more",
    "load_more",
    "visible",
    # Query
    "apply_query",
    "encode_query",
]

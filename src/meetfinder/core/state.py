"""Filter state model - pure data, no I/O."""

from dataclasses import dataclass, field
from enum import Enum

from .meeting import Meeting


class FilterCategory(Enum):
    """Tag categories, in display order. The value is the Filters key."""

    DAYS = "Days"
    TIMES = "Times"
    FORMATS = "Formats"
    TYPES = "Types"


@dataclass(frozen=True)
class MeetingTag:
    """A selectable facet value within a category."""

    tag: str
    checked: bool = False


Filters = dict[str, tuple[MeetingTag, ...]]


def empty_filters() -> Filters:
    """Filters with every category present and no tags."""
    return {category.value: () for category in FilterCategory}


@dataclass(frozen=True)
class State:
    """
    Snapshot of everything the directory view is derived from.

    Never mutated: every update publishes a new State via dataclasses.replace.
    """

    filters: Filters = field(default_factory=empty_filters)
    limit: int = 10
    loading: bool = True
    meetings: tuple[Meeting, ...] = ()
    search: tuple[str, ...] = ()
    timezone: str = ""


def initial_state(page_size: int) -> State:
    """State before the catalog has been fetched."""
    return State(limit=page_size, loading=True)

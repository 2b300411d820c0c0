"""Pagination - how much of the filtered list is shown."""

from dataclasses import replace

from .meeting import Meeting
from .state import State


def load_more(state: State, page_size: int) -> State:
    """Show one more page. The limit only ever grows."""
    return replace(state, limit=state.limit + page_size)


def has_more(state: State, filtered: list[Meeting]) -> bool:
    """Whether some filtered meetings are still hidden by the limit."""
    return len(filtered) > state.limit


def visible(state: State, filtered: list[Meeting]) -> list[Meeting]:
    """The filtered meetings currently shown."""
    return filtered[: state.limit]

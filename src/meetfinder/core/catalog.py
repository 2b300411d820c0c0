"""Catalog loading - turns a raw payload into a filterable State."""

import logging

from .meeting import DAY_ORDER, TIME_ORDER, Meeting, time_bucket
from .state import FilterCategory, Filters, MeetingTag, State

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog payload has an unusable shape."""

    pass


def _entries(payload) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("meetings"), list):
        return payload["meetings"]
    raise CatalogError(
        f"Expected a list of meetings or an object with 'meetings', got {type(payload).__name__}"
    )


def parse_meetings(payload) -> list[Meeting]:
    """Parse catalog entries, skipping the ones that cannot be read."""
    meetings = []
    for position, item in enumerate(_entries(payload)):
        if not isinstance(item, dict):
            logger.warning(f"Skipping catalog entry {position}: not an object")
            continue
        try:
            meetings.append(Meeting.from_api(item, position))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping catalog entry {position}: {e}")
    return meetings


def build_filters(meetings: list[Meeting]) -> Filters:
    """
    Collect the distinct tag values per category, all unchecked.

    Days follow the week (Sunday first), Times follow the day, Formats and
    Types are alphabetical. Every category is present even when empty.
    """
    days = {m.day for m in meetings if m.day}
    times = {time_bucket(m.time) for m in meetings if m.time is not None}
    formats = {f for m in meetings for f in m.formats}
    types = {t for m in meetings for t in m.types}

    def tags(values) -> tuple[MeetingTag, ...]:
        return tuple(MeetingTag(tag=v) for v in values)

    return {
        FilterCategory.DAYS.value: tags(d for d in DAY_ORDER if d in days),
        FilterCategory.TIMES.value: tags(t for t in TIME_ORDER if t in times),
        FilterCategory.FORMATS.value: tags(sorted(formats, key=str.lower)),
        FilterCategory.TYPES.value: tags(sorted(types, key=str.lower)),
    }


def load(payload, page_size: int) -> State:
    """
    Normalize a catalog payload into a loaded State.

    Pure function - no I/O. Raises CatalogError for an unusable payload.
    """
    meetings = parse_meetings(payload)
    logger.debug(f"Loaded {len(meetings)} meetings")
    return State(
        filters=build_filters(meetings),
        limit=page_size,
        loading=False,
        meetings=tuple(meetings),
        search=(),
        timezone="",
    )

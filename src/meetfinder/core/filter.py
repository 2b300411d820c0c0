"""Pure meeting matching - tags, search terms and timezone."""

from datetime import date

from .meeting import Meeting, localize, time_bucket
from .state import FilterCategory, State


def meeting_tags(
    meeting: Meeting,
    timezone: str = "",
    as_of: date | None = None,
) -> dict[str, set[str]]:
    """
    Tag values a meeting carries in each category.

    Days and Times are evaluated in the given timezone when it is set.
    """
    day, start = localize(meeting, timezone, as_of)
    bucket = time_bucket(start)
    return {
        FilterCategory.DAYS.value: {day} if day else set(),
        FilterCategory.TIMES.value: {bucket} if bucket else set(),
        FilterCategory.FORMATS.value: set(meeting.formats),
        FilterCategory.TYPES.value: set(meeting.types),
    }


def matches_search(meeting: Meeting, search: tuple[str, ...] | list[str]) -> bool:
    """Every search token appears somewhere in the meeting's text fields."""
    tokens = [t.lower() for t in search if t.strip()]
    if not tokens:
        return True
    haystack = " ".join(
        [meeting.name, meeting.location, meeting.notes, *meeting.formats, *meeting.types]
    ).lower()
    return all(token in haystack for token in tokens)


def filter_meetings(
    state: State,
    tags: list[str],
    as_of: date | None = None,
) -> list[Meeting]:
    """
    Meetings matching the active tags, search terms and timezone.

    Each category is constrained only by its own checked tags. Within a
    category any of them matches (OR); every category with a
    checked tag must match (AND); categories with nothing checked impose no
    constraint. Catalog order is kept.

    Pure function - no I/O.
    """
    active = set(tags)
    wanted = {
        category: {t.tag for t in category_tags if t.checked and t.tag in active}
        for category, category_tags in state.filters.items()
    }
    wanted = {category: values for category, values in wanted.items() if values}
    as_of = as_of or date.today()

    result = []
    for meeting in state.meetings:
        if not matches_search(meeting, state.search):
            continue
        if wanted:
            carried = meeting_tags(meeting, state.timezone, as_of)
            if not all(values & carried.get(category, set()) for category, values in wanted.items()):
                continue
        result.append(meeting)
    return result

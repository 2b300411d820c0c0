"""Query string sync - a shareable encoding of the current view."""

from dataclasses import replace
from urllib.parse import parse_qs, urlencode

from .state import FilterCategory, State
from .tags import checked_tags, resolve_tag, toggle_tag

SEARCH_KEY = "search"
TIMEZONE_KEY = "tz"


def _param(category: FilterCategory) -> str:
    return category.value.lower()


def encode_query(state: State) -> str:
    """
    Serialize checked tags, search and timezone.

    e.g. "days=Monday&types=Open&types=Speaker&search=step+study&tz=America/Chicago".
    Each checked tag gets its own parameter, so tag values are never split.
    Empty parts are left out, so a fresh state encodes to "".
    """
    params = {}
    for category in FilterCategory:
        checked = checked_tags(state.filters, category)
        if checked:
            params[_param(category)] = checked
    if state.search:
        params[SEARCH_KEY] = " ".join(state.search)
    if state.timezone:
        params[TIMEZONE_KEY] = state.timezone
    return urlencode(params, doseq=True, safe="/")


def apply_query(state: State, query: str) -> State:
    """
    Restore a view from an encoded query.

    Tag values are matched case-insensitively; unknown ones are ignored.
    Single-select categories keep the last value given.
    """
    params = parse_qs(query.lstrip("?"))
    filters = state.filters
    for category in FilterCategory:
        for value in params.get(_param(category), []):
            tag = resolve_tag(filters, category, value)
            if tag is not None:
                filters = toggle_tag(filters, category, tag, True)

    changes = {"filters": filters}
    if SEARCH_KEY in params:
        changes["search"] = tuple(" ".join(params[SEARCH_KEY]).split())
    if TIMEZONE_KEY in params:
        changes["timezone"] = params[TIMEZONE_KEY][-1].strip()
    return replace(state, **changes)

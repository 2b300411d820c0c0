"""Tag selection - toggling with exclusivity, and the active tag projection."""

import logging
from dataclasses import replace

from .state import FilterCategory, Filters

logger = logging.getLogger(__name__)

# Radio-like categories: checking or unchecking a tag clears its siblings.
# Times and Types are checkbox-like and leave siblings alone.
SINGLE_SELECT = frozenset({FilterCategory.DAYS.value, FilterCategory.FORMATS.value})


def _key(category: FilterCategory | str) -> str:
    if isinstance(category, FilterCategory):
        return category.value
    return category


def toggle_tag(
    filters: Filters,
    category: FilterCategory | str,
    value: str,
    checked: bool,
) -> Filters:
    """
    Set one tag's checked flag and return the new Filters.

    The category is matched case-sensitively against the Filters keys.
    An unknown category or value leaves the filters unchanged.
    Pure function - the input is never mutated.
    """
    key = _key(category)
    tags = filters.get(key)
    if tags is None or not any(t.tag == value for t in tags):
        logger.debug(f"Ignoring toggle of unknown tag {key}/{value}")
        return filters

    exclusive = key in SINGLE_SELECT
    updated = []
    for tag in tags:
        if tag.tag == value:
            updated.append(replace(tag, checked=checked))
        elif exclusive and tag.checked:
            updated.append(replace(tag, checked=False))
        else:
            updated.append(tag)

    return {**filters, key: tuple(updated)}


def active_tags(filters: Filters) -> list[str]:
    """
    Checked tag values across all categories.

    Category order first, then display order within the category. A value
    checked in two categories is listed once.
    """
    checked = [tag.tag for tags in filters.values() for tag in tags if tag.checked]
    return list(dict.fromkeys(checked))


def checked_tags(filters: Filters, category: FilterCategory | str) -> list[str]:
    """Checked tag values of a single category."""
    return [tag.tag for tag in filters.get(_key(category), ()) if tag.checked]


def resolve_tag(filters: Filters, category: FilterCategory | str, value: str) -> str | None:
    """Find the tag in a category matching value case-insensitively."""
    wanted = value.strip().lower()
    for tag in filters.get(_key(category), ()):
        if tag.tag.lower() == wanted:
            return tag.tag
    return None

"""Pure meeting domain logic - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Python weekday() order
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Display order for the Days category
DAY_ORDER = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# (label, start hour inclusive, end hour exclusive); anything else is Night
TIME_BUCKETS = (
    ("Morning", 5, 12),
    ("Afternoon", 12, 17),
    ("Evening", 17, 21),
)
NIGHT = "Night"
TIME_ORDER = tuple(label for label, _, _ in TIME_BUCKETS) + (NIGHT,)


@dataclass(frozen=True)
class Meeting:
    """A scheduled meeting in the directory."""

    id: str
    name: str
    day: str
    time: time | None
    timezone: str = ""
    duration: int | None = None
    formats: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    location: str = ""
    notes: str = ""
    url: str = ""

    def format_time(self, start: time | None = None) -> str:
        """Format the start time for display."""
        start = start if start is not None else self.time
        if start is None:
            return "Any time"
        return start.strftime("%H:%M")

    @classmethod
    def from_api(cls, data: dict, position: int = 0) -> "Meeting":
        """
        Create a Meeting from a catalog entry.

        Raises KeyError when the entry has no name, ValueError when its day
        or time cannot be parsed and TypeError when a text field is not text.
        """
        name = str(data.get("name") or "").strip()
        if not name:
            raise KeyError("name")
        return cls(
            id=str(data.get("id") or data.get("slug") or position),
            name=name,
            day=parse_day(data.get("day")),
            time=parse_time(data.get("time")),
            timezone=_text(data, "timezone"),
            duration=int(data["duration"]) if data.get("duration") else None,
            formats=_as_tuple(data.get("formats")),
            types=_as_tuple(data.get("types")),
            location=_text(data, "location"),
            notes=_text(data, "notes"),
            url=_text(data, "url"),
        )


def _text(data: dict, key: str) -> str:
    """A text field, "" when missing. Non-string values are rejected."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value.strip()


def _as_tuple(value) -> tuple[str, ...]:
    """Accept a list of strings or a comma-separated string."""
    if not value:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(dict.fromkeys(str(v).strip() for v in value if str(v).strip()))


def parse_day(value) -> str:
    """
    Normalize a day to its English name.

    Accepts a day name in any case, or an integer where 0 is Sunday.
    Missing days return "".
    """
    if value is None or value == "":
        return ""
    if isinstance(value, int):
        return DAY_ORDER[value % 7]
    text = str(value).strip()
    if text.isdigit():
        return DAY_ORDER[int(text) % 7]
    for day in DAY_ORDER:
        if day.lower() == text.lower():
            return day
    raise ValueError(f"Unknown day: {value!r}")


def parse_time(value) -> time | None:
    """Parse "H:MM", "HH:MM" or "HH:MM:SS" into a time."""
    if not value:
        return None
    parts = str(value).strip().split(":")
    hour = int(parts[0])
    minute = int(parts[1]) if len(parts) > 1 else 0
    return time(hour, minute)


def time_bucket(start: time | None) -> str | None:
    """Times tag for a start time."""
    if start is None:
        return None
    for label, begin, end in TIME_BUCKETS:
        if begin <= start.hour < end:
            return label
    return NIGHT


@lru_cache(maxsize=64)
def resolve_zone(name: str) -> ZoneInfo | None:
    """Look up an IANA timezone. Unknown names are logged and return None."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        logger.warning(f"Unknown timezone '{name}', using native meeting times")
        return None


def next_occurrence(meeting: Meeting, as_of: date) -> datetime | None:
    """
    The meeting's first start on or after as_of, in its native timezone.

    Returns None when the meeting has no day, time or timezone.
    """
    if not meeting.day or meeting.time is None:
        return None
    zone = resolve_zone(meeting.timezone)
    if zone is None:
        return None
    offset = (WEEKDAYS.index(meeting.day) - as_of.weekday()) % 7
    target = as_of + timedelta(days=offset)
    return datetime.combine(target, meeting.time, tzinfo=zone)


def localize(
    meeting: Meeting,
    timezone: str,
    as_of: date | None = None,
) -> tuple[str, time | None]:
    """
    Day and start time of a meeting as seen from another timezone.

    Meetings without a native timezone or start are never shifted, and an
    empty or unknown target timezone leaves them as they are.
    Pure function - no I/O.
    """
    zone = resolve_zone(timezone)
    if zone is None:
        return meeting.day, meeting.time
    start = next_occurrence(meeting, as_of or date.today())
    if start is None:
        return meeting.day, meeting.time
    shifted = start.astimezone(zone)
    return WEEKDAYS[shifted.weekday()], shifted.time().replace(tzinfo=None)

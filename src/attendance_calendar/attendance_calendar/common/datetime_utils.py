from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Optional, Union

from ..core.constants import MISSING_VALUE

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def parse_iso_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 UTC instant like ``2025-01-01T08:12:00Z``.

    Returns None for empty or malformed input so a single bad punch never
    breaks rendering of the rest of the calendar.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso_z(value: datetime) -> str:
    """Format an instant as ISO UTC with trailing Z and no fractional seconds."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat() + "Z"


def to_date(value: DateLike) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every day in [start, end]; nothing when end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def end_of_month(day: date) -> date:
    first_of_next = (day.replace(day=28) + timedelta(days=4)).replace(day=1)
    return first_of_next - timedelta(days=1)


def sunday_index(day: date) -> int:
    """Weekday with Sunday as 0 (Python uses Monday as 0)."""
    return (day.weekday() + 1) % 7


def format_time(value: Optional[datetime]) -> str:
    """12-hour clock like ``08:05 AM``; placeholder when there is no punch."""
    if value is None:
        return MISSING_VALUE
    return value.strftime("%I:%M %p")


def format_day(value: date) -> str:
    """Short label like ``Jan 5, 2025``."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def today_utc() -> date:
    return now_utc().date()

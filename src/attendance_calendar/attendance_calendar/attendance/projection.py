from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, each_day, end_of_month, format_day, sunday_index, to_date
from .calendar import resolve
from .model import Employee, ProjectedRow


@dataclass(frozen=True)
class DateRange:
    """Closed interval picked in the bulk view; either side may be unset."""

    start: Optional[DateLike] = None
    end: Optional[DateLike] = None

    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def normalized(self) -> tuple[Optional[date], Optional[date]]:
        start = to_date(self.start) if self.start is not None else None
        end = to_date(self.end) if self.end is not None else None
        return start, end


@dataclass(frozen=True)
class PresetRange:
    label: str
    range: DateRange


def enumerate_days(date_range: Optional[DateRange]) -> list[date]:
    if date_range is None or not date_range.is_complete():
        return []
    start, end = date_range.normalized()
    return list(each_day(start, end))


def project(date_range: Optional[DateRange], employees: Iterable[Employee]) -> list[ProjectedRow]:
    """One row per employee covering every day of the range.

    An unset or inverted range projects nothing.
    """
    days = enumerate_days(date_range)
    if not days:
        return []
    return [
        ProjectedRow(employee=emp, days=tuple((day, resolve(emp, day)) for day in days))
        for emp in employees
    ]


def preset_ranges(today: date) -> list[PresetRange]:
    yesterday = today - timedelta(days=1)
    first_this_month = today.replace(day=1)
    last_month_end = first_this_month - timedelta(days=1)
    week_start = today - timedelta(days=sunday_index(today))

    return [
        PresetRange("Today", DateRange(today, today)),
        PresetRange("Yesterday", DateRange(yesterday, yesterday)),
        PresetRange("Last 7 Days", DateRange(today - timedelta(days=6), today)),
        PresetRange("Last 30 Days", DateRange(today - timedelta(days=29), today)),
        PresetRange("This Month", DateRange(first_this_month, end_of_month(today))),
        PresetRange("Last Month", DateRange(last_month_end.replace(day=1), last_month_end)),
        PresetRange("This Week", DateRange(week_start, week_start + timedelta(days=6))),
    ]


def format_range(date_range: Optional[DateRange]) -> str:
    start, end = date_range.normalized() if date_range else (None, None)
    if start is None and end is None:
        return "Select a date range"
    if end is None:
        return f"{format_day(start)} –"
    if start is None:
        return f"– {format_day(end)}"
    return f"{format_day(start)} – {format_day(end)}"

from __future__ import annotations

import calendar as _calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional, Sequence

from ..common.datetime_utils import DateLike, each_day, end_of_month, sunday_index, to_date
from ..core.constants import YEAR_PICKER_SPAN
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, CalendarCell, Employee

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


@dataclass(frozen=True)
class MonthGrid:
    """Sunday-first weeks of exactly 7 slots; None marks padding."""

    month: date
    weeks: tuple[tuple[Optional[date], ...], ...]

    def days(self) -> list[date]:
        return [d for week in self.weeks for d in week if d is not None]


def month_anchor(year: int, month: int) -> date:
    """First day of the month picked in the month/year picker."""
    try:
        return date(int(year), int(month), 1)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid month {year!r}-{month!r}") from None


def build_grid(anchor: DateLike) -> MonthGrid:
    """Lay out the month containing ``anchor`` as a calendar grid."""
    first = to_date(anchor).replace(day=1)

    weeks: list[tuple[Optional[date], ...]] = []
    week: list[Optional[date]] = [None] * sunday_index(first)
    for day in each_day(first, end_of_month(first)):
        week.append(day)
        if len(week) == 7:
            weeks.append(tuple(week))
            week = []
    if week:
        week.extend([None] * (7 - len(week)))
        weeks.append(tuple(week))

    return MonthGrid(month=first, weeks=tuple(weeks))


def resolve(employee: Optional[Employee], day: Optional[DateLike]) -> Optional[AttendanceRecord]:
    """The employee's record for that calendar day, or None."""
    if employee is None or day is None:
        return None
    return employee.record_for(to_date(day))


def is_same_day(a: Optional[DateLike], b: Optional[DateLike]) -> bool:
    if a is None or b is None:
        return False
    return to_date(a) == to_date(b)


def calendar_rows(
    grid: MonthGrid,
    employee: Optional[Employee],
    today: Optional[date] = None,
) -> Iterator[list[CalendarCell]]:
    """Resolve each grid slot for the selected employee, one week at a time.

    The grid is reused as-is; switching employee only re-runs this.
    """
    for week in grid.weeks:
        yield [
            CalendarCell(day=day, record=resolve(employee, day), is_today=is_same_day(day, today))
            for day in week
        ]


def month_names() -> Sequence[str]:
    return tuple(_calendar.month_name[1:])


def year_options(today: date) -> list[int]:
    return list(range(today.year - YEAR_PICKER_SPAN, today.year + YEAR_PICKER_SPAN + 1))

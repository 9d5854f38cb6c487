from __future__ import annotations

from datetime import date, datetime, timezone

from src.attendance_calendar.attendance_calendar.attendance.projection import (
    DateRange,
    enumerate_days,
    format_range,
    preset_ranges,
    project,
)
from src.attendance_calendar.attendance_calendar.core.enums import AttendanceStatus


def test_single_day_range_yields_that_day(sample_roster):
    d = date(2025, 1, 2)

    rows = project(DateRange(d, d), sample_roster.all_employees())

    assert len(rows) == 5
    assert [day for day, _ in rows[0].days] == [d]
    assert rows[0].days[0][1].status == AttendanceStatus.LATE


def test_inverted_range_is_empty(sample_roster):
    assert project(DateRange(date(2025, 1, 5), date(2025, 1, 1)), sample_roster.all_employees()) == []


def test_unset_range_is_empty(sample_roster):
    employees = sample_roster.all_employees()

    assert project(None, employees) == []
    assert project(DateRange(), employees) == []
    assert project(DateRange(date(2025, 1, 1), None), employees) == []
    assert project(DateRange(None, date(2025, 1, 1)), employees) == []


def test_bounds_are_normalized_to_whole_days(sample_roster):
    date_range = DateRange(
        datetime(2025, 1, 1, 23, 0, tzinfo=timezone.utc),
        datetime(2025, 1, 2, 0, 30, tzinfo=timezone.utc),
    )

    rows = project(date_range, [sample_roster.find("DRV00001")])

    assert [d for d, _ in rows[0].days] == [date(2025, 1, 1), date(2025, 1, 2)]
    assert all(rec is not None for _, rec in rows[0].days)


def test_days_without_records_resolve_to_none(sample_roster):
    rows = project(DateRange(date(2025, 1, 1), date(2025, 1, 3)), [sample_roster.find("DRV00002")])

    assert [rec is not None for _, rec in rows[0].days] == [True, False, False]


def test_rows_follow_given_employee_order(sample_roster):
    employees = list(reversed(sample_roster.all_employees()))

    rows = project(DateRange(date(2025, 1, 1), date(2025, 1, 7)), employees)

    assert [r.employee.employee_id for r in rows] == [e.employee_id for e in employees]
    assert all(len(r.days) == 7 for r in rows)


def test_empty_roster_projects_nothing():
    assert project(DateRange(date(2025, 1, 1), date(2025, 1, 7)), []) == []


def test_enumerate_days_crosses_month_end():
    days = enumerate_days(DateRange(date(2024, 12, 30), date(2025, 1, 2)))

    assert days == [date(2024, 12, 30), date(2024, 12, 31), date(2025, 1, 1), date(2025, 1, 2)]


def test_preset_ranges(fixed_today):
    presets = {p.label: p.range for p in preset_ranges(fixed_today)}

    assert presets["Today"] == DateRange(date(2025, 1, 15), date(2025, 1, 15))
    assert presets["Yesterday"] == DateRange(date(2025, 1, 14), date(2025, 1, 14))
    assert presets["Last 7 Days"] == DateRange(date(2025, 1, 9), date(2025, 1, 15))
    assert presets["Last 30 Days"] == DateRange(date(2024, 12, 17), date(2025, 1, 15))
    assert presets["This Month"] == DateRange(date(2025, 1, 1), date(2025, 1, 31))
    assert presets["Last Month"] == DateRange(date(2024, 12, 1), date(2024, 12, 31))
    assert presets["This Week"] == DateRange(date(2025, 1, 12), date(2025, 1, 18))


def test_format_range():
    assert format_range(DateRange()) == "Select a date range"
    assert format_range(DateRange(date(2025, 1, 1))) == "Jan 1, 2025 –"
    assert format_range(DateRange(date(2025, 1, 1), date(2025, 1, 7))) == "Jan 1, 2025 – Jan 7, 2025"

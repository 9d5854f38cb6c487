from __future__ import annotations

from datetime import date, datetime, timezone

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_today(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def sample_roster():
    from src.attendance_calendar.attendance_calendar.attendance.model import AttendanceRecord, Employee, Roster
    from src.attendance_calendar.attendance_calendar.core.enums import AttendanceStatus, Role

    def rec(day: int, status=AttendanceStatus.PRESENT, reason=""):
        return AttendanceRecord(
            work_date=date(2025, 1, day),
            status=status,
            punch_in=datetime(2025, 1, day, 8, 10, tzinfo=timezone.utc),
            punch_out=datetime(2025, 1, day, 19, 40, tzinfo=timezone.utc),
            reason=reason,
            total_hours=11.5,
            vehicle_number="DL 07AMB1234",
        )

    drivers = (
        Employee("DRV00001", "Anaya Sharma", Role.DRIVER, (rec(1), rec(2, AttendanceStatus.LATE, "Car breakdown"))),
        Employee("DRV00002", "Diya Patel", Role.DRIVER, (rec(1),)),
        Employee("DRV00003", "Sai Naidu", Role.DRIVER, ()),
    )
    emts = (
        Employee("MS00001", "Meera Kumar", Role.EMT, (rec(15),)),
        Employee("MS00002", "Dhanashree Verma", Role.EMT, ()),
    )
    return Roster(drivers=drivers, emts=emts)

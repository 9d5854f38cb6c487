from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role tag as it appears in the attendance payload."""

    DRIVER = "driver"
    EMT = "emt"
    MANAGER = "manager"
    SUPPORT = "support"


class AttendanceStatus(str, Enum):
    """Daily attendance status derived from punch-in/punch-out."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    FIRST_HALF_DAY_LEAVE = "first_half_day_leave"
    SECOND_HALF_DAY_LEAVE = "second_half_day_leave"
    SHORT_LEAVE = "short_leave"


class ViewMode(str, Enum):
    """Which calendar view the dashboard is showing."""

    MONTH = "month"
    BULK = "bulk"

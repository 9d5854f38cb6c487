from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from functools import cached_property
from typing import Optional

from ..core.enums import AttendanceStatus, Role


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance for one calendar day."""

    work_date: date
    status: AttendanceStatus
    punch_in: Optional[datetime] = None
    punch_out: Optional[datetime] = None
    reason: str = ""
    total_hours: float = 0.0
    vehicle_number: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    """Roster entry with its attendance history ordered by date."""

    employee_id: str
    name: str
    role: Role
    attendance: tuple[AttendanceRecord, ...] = ()
    phone_number: Optional[str] = None

    @cached_property
    def _records_by_date(self) -> dict[date, AttendanceRecord]:
        by_date: dict[date, AttendanceRecord] = {}
        for r in self.attendance:
            by_date.setdefault(r.work_date, r)
        return by_date

    def record_for(self, day: date) -> Optional[AttendanceRecord]:
        return self._records_by_date.get(day)


@dataclass(frozen=True)
class Roster:
    """The two employee collections delivered by the attendance source."""

    drivers: tuple[Employee, ...] = ()
    emts: tuple[Employee, ...] = ()

    def all_employees(self) -> list[Employee]:
        return [*self.drivers, *self.emts]

    def find(self, employee_id: Optional[str]) -> Optional[Employee]:
        if not employee_id:
            return None
        for emp in self.all_employees():
            if emp.employee_id == employee_id:
                return emp
        return None

    def is_empty(self) -> bool:
        return not self.drivers and not self.emts


EMPTY_ROSTER = Roster()


@dataclass(frozen=True)
class CalendarCell:
    """A month-grid slot; ``day`` is None for leading/trailing padding."""

    day: Optional[date]
    record: Optional[AttendanceRecord] = None
    is_today: bool = False


@dataclass(frozen=True)
class ProjectedRow:
    """Bulk-view row: one employee across every day of the selected range."""

    employee: Employee
    days: tuple[tuple[date, Optional[AttendanceRecord]], ...] = field(default_factory=tuple)

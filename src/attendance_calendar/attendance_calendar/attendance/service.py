from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Union

from ..common.datetime_utils import format_time, today_utc
from ..core.enums import AttendanceStatus, ViewMode
from ..core.exceptions import DomainError, NotFoundError
from ..users.filters import filter_employees
from .calendar import WEEKDAY_NAMES, MonthGrid, build_grid, calendar_rows, month_anchor, month_names, year_options
from .model import EMPTY_ROSTER, AttendanceRecord, CalendarCell, Employee, ProjectedRow, Roster
from .projection import DateRange, enumerate_days, format_range, project
from .repository import RosterRepository

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.FIRST_HALF_DAY_LEAVE: "First Half Day Leave",
    AttendanceStatus.SECOND_HALF_DAY_LEAVE: "Second Half Day Leave",
    AttendanceStatus.SHORT_LEAVE: "Short Leave",
}

STATUS_CSS = {
    AttendanceStatus.PRESENT: "bg-success",
    AttendanceStatus.ABSENT: "bg-danger",
    AttendanceStatus.LATE: "bg-warning text-dark",
    AttendanceStatus.FIRST_HALF_DAY_LEAVE: "bg-info text-dark",
    AttendanceStatus.SECOND_HALF_DAY_LEAVE: "bg-info text-dark",
    AttendanceStatus.SHORT_LEAVE: "bg-secondary",
}


class AttendanceCalendarService:
    """Dashboard selection state plus the calendar queries behind it.

    Selection is independent per axis: picking a month or a range rebuilds
    only that view, and none of them clears the selected employee.
    """

    def __init__(self, roster: RosterRepository, *, today: Callable[[], date] = today_utc):
        self._repo = roster
        self._today = today
        self._roster: Roster = EMPTY_ROSTER

        self._selected_id: Optional[str] = None
        self._mode = ViewMode.MONTH
        self._grid: MonthGrid = build_grid(today())
        self._range = DateRange()
        self._name_query = ""
        self._role: Optional[str] = None

    # --- data ---------------------------------------------------------

    def reload(self) -> Roster:
        """Fetch the roster; on failure keep going with an empty one."""
        try:
            self._roster = self._repo.load()
        except (OSError, ValueError, DomainError):
            logger.exception("Failed to load attendance roster, continuing with an empty roster")
            self._roster = EMPTY_ROSTER
        return self._roster

    @property
    def roster(self) -> Roster:
        return self._roster

    # --- selection state ----------------------------------------------

    @property
    def selected_employee(self) -> Optional[Employee]:
        return self._roster.find(self._selected_id)

    @property
    def view_mode(self) -> ViewMode:
        return self._mode

    @property
    def grid(self) -> MonthGrid:
        return self._grid

    @property
    def date_range(self) -> DateRange:
        return self._range

    def select_employee(self, employee_id: str) -> Employee:
        employee = self._get_employee(employee_id)
        self._selected_id = employee.employee_id
        return employee

    def clear_selection(self) -> None:
        self._selected_id = None

    def set_view_mode(self, mode: Union[ViewMode, str]) -> None:
        self._mode = ViewMode(mode)

    def toggle_view(self) -> ViewMode:
        self._mode = ViewMode.BULK if self._mode == ViewMode.MONTH else ViewMode.MONTH
        return self._mode

    def select_month(self, year: int, month: int) -> MonthGrid:
        anchor = month_anchor(year, month)
        if anchor != self._grid.month:
            self._grid = build_grid(anchor)
        return self._grid

    def set_date_range(self, date_range: DateRange) -> None:
        self._range = date_range

    def set_filter(self, *, name_query: str = "", role: Optional[str] = None) -> None:
        self._name_query = name_query or ""
        self._role = role or None

    def employees(self) -> list[Employee]:
        return filter_employees(self._roster.all_employees(), self._name_query, self._role)

    # --- views ---------------------------------------------------------

    def current_month_ui(self) -> dict:
        return self._month_ui(self._grid, self.selected_employee)

    def current_bulk_ui(self) -> dict:
        return self._bulk_ui(self._range, self.employees())

    def month_calendar_ui(self, employee_id: Optional[str], anchor: date) -> dict:
        employee = self._get_employee(employee_id) if employee_id else None
        return self._month_ui(build_grid(anchor), employee)

    def bulk_ui(self, date_range: DateRange, *, name_query: str = "", role: Optional[str] = None) -> dict:
        employees = filter_employees(self._roster.all_employees(), name_query, role)
        return self._bulk_ui(date_range, employees)

    def roster_ui(self, *, name_query: str = "", role: Optional[str] = None) -> list[dict]:
        return [self._employee_ui(e) for e in filter_employees(self._roster.all_employees(), name_query, role)]

    def _get_employee(self, employee_id: Optional[str]) -> Employee:
        employee = self._roster.find(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _month_ui(self, grid: MonthGrid, employee: Optional[Employee]) -> dict:
        today = self._today()
        return {
            "month": grid.month.strftime("%Y-%m"),
            "month_name": month_names()[grid.month.month - 1],
            "weekdays": list(WEEKDAY_NAMES),
            "year": grid.month.year,
            "years": year_options(today),
            "employee": self._employee_ui(employee) if employee else None,
            "weeks": [[self._cell_ui(c) for c in row] for row in calendar_rows(grid, employee, today)],
        }

    def _bulk_ui(self, date_range: DateRange, employees: list[Employee]) -> dict:
        rows: list[ProjectedRow] = project(date_range, employees)
        days = enumerate_days(date_range)
        return {
            "label": format_range(date_range),
            "days": [d.isoformat() for d in days],
            "rows": [
                {
                    "employee": self._employee_ui(r.employee),
                    "cells": [self._record_ui(rec) for _, rec in r.days],
                }
                for r in rows
            ],
        }

    def _employee_ui(self, employee: Employee) -> dict:
        return {
            "id": employee.employee_id,
            "name": employee.name,
            "role": employee.role.value,
            "phone_number": employee.phone_number,
        }

    def _cell_ui(self, cell: CalendarCell) -> dict:
        out = {
            "date": cell.day.isoformat() if cell.day else None,
            "day": cell.day.day if cell.day else None,
            "is_today": cell.is_today,
        }
        out.update(self._record_ui(cell.record))
        return out

    def _record_ui(self, record: Optional[AttendanceRecord]) -> dict:
        if record is None:
            return {"status": None, "label": "", "css_class": ""}

        status = record.status
        return {
            "status": status.value,
            "label": STATUS_LABELS.get(status, status.value),
            "css_class": STATUS_CSS.get(status, "bg-secondary"),
            "punch_in": format_time(record.punch_in),
            "punch_out": format_time(record.punch_out),
            "total_hours": record.total_hours,
            "reason": record.reason,
            "vehicle_number": record.vehicle_number,
        }

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from src.attendance_calendar.attendance_calendar import create_app
from src.attendance_calendar.attendance_calendar.attendance.generator import AttendanceRecordGenerator
from src.attendance_calendar.attendance_calendar.attendance.model import Roster
from src.attendance_calendar.attendance_calendar.attendance.service import AttendanceCalendarService
from src.attendance_calendar.attendance_calendar.container import Container


@dataclass
class InMemoryRoster:
    roster: Roster

    def load(self) -> Roster:
        return self.roster


@pytest.fixture
def client(monkeypatch, sample_roster, fixed_today):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = InMemoryRoster(sample_roster)
    container = Container(
        generator=AttendanceRecordGenerator(seed=1),
        roster_repo=repo,
        calendar_service=AttendanceCalendarService(repo, today=lambda: fixed_today),
    )
    app = create_app(container)
    return app.test_client()


def test_roster_filter_endpoint(client):
    res = client.get("/api/roster?q=ana&role=driver")

    assert res.status_code == 200
    assert [e["id"] for e in res.get_json()["data"]] == ["DRV00001"]


def test_roster_unknown_role_matches_nobody(client):
    res = client.get("/api/roster?role=pilot")

    assert res.status_code == 200
    assert res.get_json()["data"] == []


def test_roles_endpoint(client):
    assert client.get("/api/roles?q=e").get_json()["data"] == ["Manager", "EMT", "Driver"]
    assert client.get("/api/roles?q=dr").get_json()["data"] == ["Driver"]


def test_employee_calendar(client):
    res = client.get("/api/employees/DRV00001/calendar?month=2025-01")

    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["employee"]["id"] == "DRV00001"
    assert [c["date"] for c in data["weeks"][0]][:4] == [None, None, None, "2025-01-01"]
    assert data["weeks"][0][4]["status"] == "late"


def test_employee_calendar_unknown_employee(client):
    res = client.get("/api/employees/DRV09999/calendar?month=2025-01")

    assert res.status_code == 404


def test_employee_calendar_bad_month(client):
    res = client.get("/api/employees/DRV00001/calendar?month=January")

    assert res.status_code == 400


def test_bulk_endpoint(client):
    res = client.get("/api/attendance/bulk?start=2025-01-01&end=2025-01-02&role=emt")

    data = res.get_json()["data"]
    assert data["days"] == ["2025-01-01", "2025-01-02"]
    assert [r["employee"]["id"] for r in data["rows"]] == ["MS00001", "MS00002"]


def test_bulk_endpoint_without_range_is_empty(client):
    data = client.get("/api/attendance/bulk").get_json()["data"]

    assert data == {"label": "Select a date range", "days": [], "rows": []}


def test_bulk_endpoint_bad_date(client):
    assert client.get("/api/attendance/bulk?start=01/02/2025&end=2025-01-03").status_code == 400


def test_date_presets(client):
    data = client.get("/api/date-presets").get_json()["data"]

    assert [p["label"] for p in data] == [
        "Today", "Yesterday", "Last 7 Days", "Last 30 Days", "This Month", "Last Month", "This Week",
    ]
    assert all(p["start"] <= p["end"] for p in data)

"""Convert between the attendance JSON payload and domain objects.

Payload shape::

    {"drivers": [Employee...], "emts": [Employee...]}

    Employee: {"id", "name", "phoneNumber", "userRole", "attendance": [Record...]}
    Record:   {"date", "status", "reason", "punchIn", "punchOut",
               "totalWorkingHour", "ambulanceNumber"}
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_instant, to_iso_z
from ..common.validators import require_employee_id, require_non_empty, require_role
from ..core.constants import MISSING_REASON
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .classifier import worked_hours
from .model import AttendanceRecord, Employee, Roster

logger = logging.getLogger(__name__)

COLLECTIONS = ("drivers", "emts")


def decode_roster(payload: Any) -> Roster:
    if not isinstance(payload, Mapping):
        raise ValidationError("attendance payload must be an object")

    decoded = {}
    for name in COLLECTIONS:
        items = payload.get(name) or []
        if not isinstance(items, list):
            raise ValidationError(f"{name} must be a list")
        decoded[name] = tuple(decode_employee(item) for item in items)
    return Roster(**decoded)


def decode_employee(item: Any) -> Employee:
    if not isinstance(item, Mapping):
        raise ValidationError("employee entry must be an object")

    employee_id = require_employee_id(item.get("id"))
    records: dict = {}
    for raw in item.get("attendance") or []:
        record = decode_record(raw)
        if record.work_date in records:
            logger.warning("Duplicate attendance for %s on %s, keeping the first", employee_id, record.work_date)
            continue
        records[record.work_date] = record

    return Employee(
        employee_id=employee_id,
        name=require_non_empty(item.get("name"), "name"),
        role=require_role(item.get("userRole")),
        attendance=tuple(records[d] for d in sorted(records)),
        phone_number=item.get("phoneNumber") or None,
    )


def decode_record(raw: Any) -> AttendanceRecord:
    if not isinstance(raw, Mapping):
        raise ValidationError("attendance entry must be an object")

    try:
        work_date = parse_iso_date(str(raw.get("date")))
    except ValueError:
        raise ValidationError(f"invalid attendance date {raw.get('date')!r}") from None

    try:
        status = AttendanceStatus(raw.get("status"))
    except ValueError:
        raise ValidationError(f"unknown attendance status {raw.get('status')!r}") from None

    punch_in = _decode_instant(raw.get("punchIn"), work_date, "punchIn")
    punch_out = _decode_instant(raw.get("punchOut"), work_date, "punchOut")

    total = raw.get("totalWorkingHour")
    if total is None:
        total = worked_hours(punch_in, punch_out) if punch_in and punch_out else 0.0
    try:
        total = float(total)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid totalWorkingHour {raw.get('totalWorkingHour')!r}") from None

    reason = str(raw.get("reason") or "").strip()
    if status == AttendanceStatus.PRESENT and reason:
        logger.warning("Dropping reason %r from present day %s", reason, work_date)
        reason = ""
    elif status != AttendanceStatus.PRESENT and not reason:
        logger.warning("No reason given for %s on %s", status.value, work_date)
        reason = MISSING_REASON

    return AttendanceRecord(
        work_date=work_date,
        status=status,
        punch_in=punch_in,
        punch_out=punch_out,
        reason=reason,
        total_hours=round(max(total, 0.0), 2),
        vehicle_number=raw.get("ambulanceNumber") or None,
    )


def _decode_instant(value: Optional[str], work_date, field_name: str):
    parsed = parse_iso_instant(value)
    if value and parsed is None:
        logger.warning("Ignoring malformed %s %r on %s", field_name, value, work_date)
    return parsed


def encode_roster(roster: Roster) -> dict:
    return {
        "drivers": [encode_employee(e) for e in roster.drivers],
        "emts": [encode_employee(e) for e in roster.emts],
    }


def encode_employee(employee: Employee) -> dict:
    out = {"id": employee.employee_id, "name": employee.name}
    if employee.phone_number:
        out["phoneNumber"] = employee.phone_number
    out["userRole"] = employee.role.value
    out["attendance"] = [encode_record(r) for r in employee.attendance]
    return out


def encode_record(record: AttendanceRecord) -> dict:
    return {
        "date": record.work_date.isoformat(),
        "status": record.status.value,
        "reason": record.reason,
        "punchIn": to_iso_z(record.punch_in) if record.punch_in else None,
        "punchOut": to_iso_z(record.punch_out) if record.punch_out else None,
        "totalWorkingHour": record.total_hours,
        "ambulanceNumber": record.vehicle_number,
    }

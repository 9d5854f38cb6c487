from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_month, today_utc
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .projection import DateRange, format_range, preset_ranges


def _optional_date(name: str):
    value = (request.args.get(name) or "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD") from None


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/employees/<employee_id>/calendar", methods=["GET"], endpoint="employee_calendar")
    def employee_calendar(employee_id: str):
        month = (request.args.get("month") or "").strip()
        if month:
            try:
                anchor = parse_month(month)
            except ValueError:
                raise ValidationError("month must be YYYY-MM") from None
        else:
            anchor = today_utc().replace(day=1)

        return jsonify({"success": True, "data": service.month_calendar_ui(employee_id, anchor)})

    @app.route("/api/attendance/bulk", methods=["GET"], endpoint="bulk_attendance")
    def bulk_attendance():
        date_range = DateRange(_optional_date("start"), _optional_date("end"))
        data = service.bulk_ui(
            date_range,
            name_query=request.args.get("q", ""),
            role=request.args.get("role") or None,
        )
        return jsonify({"success": True, "data": data})

    @app.route("/api/date-presets", methods=["GET"], endpoint="date_presets")
    def date_presets():
        presets = [
            {
                "label": p.label,
                "start": p.range.start.isoformat(),
                "end": p.range.end.isoformat(),
                "display": format_range(p.range),
            }
            for p in preset_ranges(today_utc())
        ]
        return jsonify({"success": True, "data": presets})

from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .filters import filter_role_options


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    @app.route("/api/roster", methods=["GET"], endpoint="roster")
    def roster():
        employees = service.roster_ui(
            name_query=request.args.get("q", ""),
            role=request.args.get("role") or None,
        )
        return jsonify({"success": True, "data": employees})

    @app.route("/api/roles", methods=["GET"], endpoint="roles")
    def roles():
        return jsonify({"success": True, "data": filter_role_options(request.args.get("q", ""))})

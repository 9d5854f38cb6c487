"""Attendance Calendar package.

Organized by feature modules (attendance, users, shifts) with pure
calendar/classification logic and a thin Flask JSON layer on top.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        window_start = getattr(settings, "WINDOW_START", None)
        container = build_container(
            roster_path=getattr(settings, "ROSTER_PATH", None),
            generator_seed=getattr(settings, "GENERATOR_SEED", None),
            window_start=parse_iso_date(window_start) if window_start else None,
        )

    roster = container.calendar_service.reload()
    if app.config["DEBUG"]:
        logger.info(
            "settings=%s roster=%d drivers/%d emts",
            settings_module,
            len(roster.drivers),
            len(roster.emts),
        )

    register_users(app, container)
    register_attendance(app, container)

    return app

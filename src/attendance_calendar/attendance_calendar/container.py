from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .attendance.generator import AttendanceRecordGenerator
from .attendance.json_roster_repository import GeneratedRosterRepository, JsonFileRosterRepository
from .attendance.repository import RosterRepository
from .attendance.service import AttendanceCalendarService
from .core.constants import DEFAULT_WINDOW_START


@dataclass(frozen=True)
class Container:
    generator: AttendanceRecordGenerator
    roster_repo: RosterRepository
    calendar_service: AttendanceCalendarService


def build_container(
    *,
    roster_path: Optional[str] = None,
    generator_seed: Optional[Union[int, str]] = None,
    window_start: Optional[date] = None,
) -> Container:
    generator = AttendanceRecordGenerator(
        seed=generator_seed if generator_seed not in (None, "") else None,
        window_start=window_start or DEFAULT_WINDOW_START,
    )

    if roster_path:
        roster_repo: RosterRepository = JsonFileRosterRepository(roster_path)
    else:
        roster_repo = GeneratedRosterRepository(generator)

    calendar_service = AttendanceCalendarService(roster_repo)

    return Container(
        generator=generator,
        roster_repo=roster_repo,
        calendar_service=calendar_service,
    )

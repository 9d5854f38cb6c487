from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Mapping

from ..core.constants import DEFAULT_SHIFT_HOURS, DEFAULT_SHIFT_START_HOUR, DRIVER_SHIFT_HOURS, EMT_SHIFT_HOURS
from ..core.enums import Role


def _default_hours() -> dict[Role, int]:
    return {Role.DRIVER: DRIVER_SHIFT_HOURS, Role.EMT: EMT_SHIFT_HOURS}


@dataclass(frozen=True)
class ShiftPolicy:
    """Shift model: how long each role's shift is and when it starts (UTC).

    Roles without an explicit entry fall back to ``default_hours``.
    """

    hours_by_role: Mapping[Role, int] = field(default_factory=_default_hours)
    default_hours: int = DEFAULT_SHIFT_HOURS
    start_time: time = time(DEFAULT_SHIFT_START_HOUR, 0)

    def shift_hours(self, role: Role) -> int:
        return int(self.hours_by_role.get(role, self.default_hours))

    def shift_window(self, role: Role, work_date: date) -> tuple[datetime, datetime]:
        start = datetime.combine(work_date, self.start_time, tzinfo=timezone.utc)
        return start, start + timedelta(hours=self.shift_hours(role))


DEFAULT_SHIFT_POLICY = ShiftPolicy()

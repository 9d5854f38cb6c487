"""Synthetic attendance data for demos and fixtures.

This is a seed-data generator, not production business logic: punch times,
absences and the borderline present/late calls are all random. The
classification itself goes through the same ``ShiftStatusClassifier`` the
rest of the app uses, so generated records have the same shape as real ones.
"""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable, Optional, Union

from ..common.datetime_utils import each_day, today_utc
from ..core.constants import (
    ABSENCE_PROBABILITY,
    DEFAULT_WINDOW_START,
    DRIVER_COUNT,
    DRIVER_PREFIX,
    EMPLOYEE_SEQUENCE_DIGITS,
    EMT_COUNT,
    EMT_PREFIX,
    PUNCH_JITTER_MINUTES,
)
from ..core.enums import AttendanceStatus, Role
from ..shifts.model import DEFAULT_SHIFT_POLICY, ShiftPolicy
from .classifier import ShiftStatusClassifier
from .model import AttendanceRecord, Employee, Roster
from .strategies.random_strategy import RandomTieBreak

FIRST_NAMES = ("Aarav", "Vivaan", "Aditya", "Vihaan", "Krishna", "Aryan", "Sai", "Anaya", "Diya", "Meera")
LAST_NAMES = ("Sharma", "Verma", "Reddy", "Naidu", "Kumar", "Yadav", "Patel", "Joshi", "Gupta", "Mishra")

REASONS = (
    "Family emergency",
    "Medical issue",
    "Personal reason",
    "Out of town",
    "Health checkup",
    "Car breakdown",
    "Power outage",
    "Internet issue",
    "Feeling sick",
    "Bad weather",
)

STATE_CODES = ("DL", "HR", "UP", "PB", "UK")


class AttendanceRecordGenerator:
    """Builds one record per day per employee for a fixed date window.

    With a ``seed`` every call is a pure function of its arguments: the same
    role, window and key always give the same records. Without one each call
    draws fresh randomness.
    """

    def __init__(
        self,
        *,
        seed: Optional[Union[int, str]] = None,
        policy: ShiftPolicy = DEFAULT_SHIFT_POLICY,
        window_start: date = DEFAULT_WINDOW_START,
        today: Callable[[], date] = today_utc,
    ):
        self._seed = seed
        self._policy = policy
        self._window_start = window_start
        self._today = today

    def _rng(self, *parts: object) -> random.Random:
        if self._seed is None:
            return random.Random()
        return random.Random(":".join(str(p) for p in (self._seed, *parts)))

    def generate(
        self,
        role: Role,
        start: Optional[date] = None,
        end: Optional[date] = None,
        *,
        key: str = "",
    ) -> list[AttendanceRecord]:
        start = start or self._window_start
        end = end or self._today()
        rng = self._rng(key, role.value, start.isoformat(), end.isoformat())
        classifier = ShiftStatusClassifier(RandomTieBreak(rng))
        shift_hours = self._policy.shift_hours(role)

        records: list[AttendanceRecord] = []
        for day in each_day(start, end):
            shift_start, shift_end = self._policy.shift_window(role, day)
            punch_in = shift_start + timedelta(minutes=rng.randrange(PUNCH_JITTER_MINUTES))
            punch_out = shift_end - timedelta(minutes=rng.randrange(PUNCH_JITTER_MINUTES))

            if rng.random() < ABSENCE_PROBABILITY:
                punch_in = punch_out = shift_start

            result = classifier.classify(punch_in, punch_out, shift_hours)
            reason = "" if result.status == AttendanceStatus.PRESENT else rng.choice(REASONS)

            records.append(
                AttendanceRecord(
                    work_date=day,
                    status=result.status,
                    punch_in=punch_in,
                    punch_out=punch_out,
                    reason=reason,
                    total_hours=result.worked_hours,
                    vehicle_number=_vehicle_number(rng),
                )
            )
        return records

    def generate_employees(self, count: int, prefix: str, role: Role) -> list[Employee]:
        employees = []
        for seq in range(1, count + 1):
            employee_id = f"{prefix}{seq:0{EMPLOYEE_SEQUENCE_DIGITS}d}"
            rng = self._rng("profile", employee_id)
            employees.append(
                Employee(
                    employee_id=employee_id,
                    name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                    role=role,
                    attendance=tuple(self.generate(role, key=employee_id)),
                    phone_number=f"+91{rng.randint(6000000000, 9999999999)}",
                )
            )
        return employees

    def generate_roster(self, *, drivers: int = DRIVER_COUNT, emts: int = EMT_COUNT) -> Roster:
        return Roster(
            drivers=tuple(self.generate_employees(drivers, DRIVER_PREFIX, Role.DRIVER)),
            emts=tuple(self.generate_employees(emts, EMT_PREFIX, Role.EMT)),
        )


def _vehicle_number(rng: random.Random) -> str:
    state = rng.choice(STATE_CODES)
    region = rng.randint(1, 99)
    number = rng.randint(1000, 9999)
    return f"{state} {region:02d}AMB{number}"

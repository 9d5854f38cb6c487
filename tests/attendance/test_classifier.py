from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_calendar.attendance_calendar.attendance.classifier import (
    ShiftStatusClassifier,
    band_for,
    classify,
    worked_hours,
)
from src.attendance_calendar.attendance_calendar.attendance.strategies.base import StatusBand, TieBreakStrategy
from src.attendance_calendar.attendance_calendar.attendance.strategies.random_strategy import RandomTieBreak
from src.attendance_calendar.attendance_calendar.core.enums import AttendanceStatus

SHIFT_START = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


class AlwaysAlternate(TieBreakStrategy):
    def decide(self, band: StatusBand) -> AttendanceStatus:
        return band.alternate


class FixedRandom:
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def test_same_instant_is_absent():
    result = classify(SHIFT_START, SHIFT_START, 12)

    assert result.worked_hours == 0
    assert result.status == AttendanceStatus.ABSENT


def test_eleven_and_a_half_hours_of_twelve_is_present():
    result = classify(SHIFT_START, SHIFT_START.replace(hour=19, minute=30), 12)

    assert result.worked_hours == 11.5
    assert result.status == AttendanceStatus.PRESENT


@pytest.mark.parametrize(
    "hours, expected",
    [
        (9, AttendanceStatus.LATE),
        (10, AttendanceStatus.LATE),
        (6, AttendanceStatus.FIRST_HALF_DAY_LEAVE),
        (7, AttendanceStatus.FIRST_HALF_DAY_LEAVE),
        (3, AttendanceStatus.SECOND_HALF_DAY_LEAVE),
        (4, AttendanceStatus.SECOND_HALF_DAY_LEAVE),
        (2, AttendanceStatus.SHORT_LEAVE),
    ],
)
def test_bands_with_default_tie_break(hours, expected):
    result = classify(SHIFT_START, SHIFT_START + timedelta(hours=hours), 12)

    assert result.status == expected


def test_driver_shift_uses_its_own_length():
    # 11.5h is present for a 12h EMT shift but under half of a 24h driver shift
    result = classify(SHIFT_START, SHIFT_START.replace(hour=19, minute=30), 24)

    assert result.status == AttendanceStatus.SECOND_HALF_DAY_LEAVE


def test_overnight_punch_out_wraps_forward():
    punch_in = SHIFT_START.replace(hour=22)
    punch_out = SHIFT_START.replace(hour=6)

    assert worked_hours(punch_in, punch_out) == 8.0


def test_worked_hours_never_negative_even_days_apart():
    punch_in = SHIFT_START + timedelta(days=3)

    hours = worked_hours(punch_in, SHIFT_START + timedelta(hours=2))

    assert 0 <= hours < 24


@pytest.mark.parametrize("minutes", [1, 20, 45, 90, 613])
def test_worked_hours_is_rounded_elapsed_time(minutes):
    punch_out = SHIFT_START + timedelta(minutes=minutes)

    assert worked_hours(SHIFT_START, punch_out) == round(minutes / 60, 2)


def test_injected_tie_break_decides_borderline_days():
    classifier = ShiftStatusClassifier(AlwaysAlternate())

    result = classifier.classify(SHIFT_START, SHIFT_START.replace(hour=19, minute=30), 12)

    assert result.status == AttendanceStatus.LATE
    assert result.worked_hours == 11.5


def test_tie_break_does_not_touch_absent_or_short_leave():
    classifier = ShiftStatusClassifier(AlwaysAlternate())

    assert classifier.classify(SHIFT_START, SHIFT_START, 12).status == AttendanceStatus.ABSENT
    assert classifier.classify(SHIFT_START, SHIFT_START + timedelta(hours=1), 12).status == AttendanceStatus.SHORT_LEAVE


def test_random_tie_break_uses_band_weight():
    band = band_for(11.5, 12)

    assert RandomTieBreak(FixedRandom(0.1)).decide(band) == AttendanceStatus.PRESENT
    assert RandomTieBreak(FixedRandom(0.95)).decide(band) == AttendanceStatus.LATE


def test_band_for_below_quarter_is_none():
    assert band_for(2.99, 12) is None
    assert band_for(3, 12).primary == AttendanceStatus.SECOND_HALF_DAY_LEAVE

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..core.enums import AttendanceStatus
from .strategies.base import StatusBand, TieBreakStrategy
from .strategies.strict_strategy import StrictTieBreak

# Highest band first; the first band whose threshold is met wins.
STATUS_BANDS: tuple[StatusBand, ...] = (
    StatusBand(0.90, AttendanceStatus.PRESENT, AttendanceStatus.LATE, 0.9),
    StatusBand(0.75, AttendanceStatus.LATE, AttendanceStatus.FIRST_HALF_DAY_LEAVE, 0.7),
    StatusBand(0.50, AttendanceStatus.FIRST_HALF_DAY_LEAVE, AttendanceStatus.SECOND_HALF_DAY_LEAVE, 0.7),
    StatusBand(0.25, AttendanceStatus.SECOND_HALF_DAY_LEAVE, AttendanceStatus.SHORT_LEAVE, 0.7),
)

_DAY = timedelta(hours=24)


@dataclass(frozen=True)
class Classification:
    status: AttendanceStatus
    worked_hours: float


def worked_hours(punch_in: datetime, punch_out: datetime) -> float:
    """Hours between the punches, rounded to two decimals.

    A punch-out earlier than the punch-in is an overnight shift and wraps
    forward by 24 hours. Identical instants mean nothing was worked.
    """
    elapsed = punch_out - punch_in
    if elapsed < timedelta(0):
        elapsed = elapsed % _DAY
    return round(elapsed.total_seconds() / 3600, 2)


def band_for(hours: float, shift_hours: float) -> Optional[StatusBand]:
    for band in STATUS_BANDS:
        if hours >= shift_hours * band.min_fraction:
            return band
    return None


@dataclass
class ShiftStatusClassifier:
    """Derive a day's status and worked hours from its punches.

    The tie-break between a band's primary and alternate status is injected;
    the default is deterministic.
    """

    tie_break: TieBreakStrategy = field(default_factory=StrictTieBreak)

    def classify(self, punch_in: datetime, punch_out: datetime, shift_hours: float) -> Classification:
        hours = worked_hours(punch_in, punch_out)
        if hours == 0:
            return Classification(status=AttendanceStatus.ABSENT, worked_hours=hours)

        band = band_for(hours, shift_hours)
        if band is None:
            return Classification(status=AttendanceStatus.SHORT_LEAVE, worked_hours=hours)
        return Classification(status=self.tie_break.decide(band), worked_hours=hours)


def classify(
    punch_in: datetime,
    punch_out: datetime,
    shift_hours: float,
    *,
    tie_break: Optional[TieBreakStrategy] = None,
) -> Classification:
    return ShiftStatusClassifier(tie_break or StrictTieBreak()).classify(punch_in, punch_out, shift_hours)

from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import StatusBand, TieBreakStrategy


class StrictTieBreak(TieBreakStrategy):
    """Deterministic: always the band's primary status."""

    def decide(self, band: StatusBand) -> AttendanceStatus:
        return band.primary

from __future__ import annotations

import random
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import StatusBand, TieBreakStrategy


class RandomTieBreak(TieBreakStrategy):
    """Borderline days get the alternate status with probability 1 - weight.

    Used for synthetic data only. Pass a seeded ``random.Random`` to make the
    sequence of decisions repeatable.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def decide(self, band: StatusBand) -> AttendanceStatus:
        if self._rng.random() < band.primary_weight:
            return band.primary
        return band.alternate

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusBand:
    """A worked-hours band, expressed as a fraction of the shift length.

    ``primary_weight`` is how often the primary status wins over the
    alternate when a tie-break is allowed to be random.
    """

    min_fraction: float
    primary: AttendanceStatus
    alternate: AttendanceStatus
    primary_weight: float


class TieBreakStrategy(ABC):
    """Strategy Pattern: pick between a band's primary and alternate status."""

    @abstractmethod
    def decide(self, band: StatusBand) -> AttendanceStatus:
        raise NotImplementedError

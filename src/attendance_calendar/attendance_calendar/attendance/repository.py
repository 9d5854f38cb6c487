from __future__ import annotations

from typing import Protocol

from .model import Roster


class RosterRepository(Protocol):
    def load(self) -> Roster:
        """Fetch the full roster with attendance histories.

        May raise on I/O or payload errors; callers decide how to degrade.
        """

        raise NotImplementedError

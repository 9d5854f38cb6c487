from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .codec import decode_roster
from .generator import AttendanceRecordGenerator
from .model import Roster

logger = logging.getLogger(__name__)


class JsonFileRosterRepository:
    """Reads the attendance payload from a JSON file on disk."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Roster:
        logger.debug("Loading roster from %s", self._path)
        with self._path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
        roster = decode_roster(payload)
        logger.info(
            "Loaded %d drivers and %d EMTs from %s", len(roster.drivers), len(roster.emts), self._path
        )
        return roster


class GeneratedRosterRepository:
    """Serves a synthetic roster when no payload file is configured."""

    def __init__(self, generator: AttendanceRecordGenerator):
        self._generator = generator

    def load(self) -> Roster:
        logger.info("No roster file configured, generating synthetic attendance")
        return self._generator.generate_roster()

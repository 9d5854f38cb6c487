"""Print a synthetic attendance payload as pretty JSON on stdout.

Takes no arguments. Set GENERATOR_SEED (any text) to get the same payload
every run.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Optional, TextIO, Union

from dotenv import load_dotenv

from .attendance.codec import encode_roster
from .attendance.generator import AttendanceRecordGenerator


def generate_payload(seed: Optional[Union[int, str]] = None) -> dict:
    return encode_roster(AttendanceRecordGenerator(seed=seed).generate_roster())


def main(out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    load_dotenv(override=False)
    seed = (os.getenv("GENERATOR_SEED") or "").strip() or None
    payload = generate_payload(seed)
    json.dump(payload, out, indent=2)
    out.write("\n")


if __name__ == "__main__":
    main()

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Generated attendance history starts here and runs up to today.
DEFAULT_WINDOW_START = date(2025, 1, 1)

DEFAULT_SHIFT_START_HOUR = 8
DEFAULT_SHIFT_HOURS = 12
DRIVER_SHIFT_HOURS = 24
EMT_SHIFT_HOURS = 12

# Punch-in within the first hour, punch-out within the last hour of a shift.
PUNCH_JITTER_MINUTES = 60
ABSENCE_PROBABILITY = 0.05

DRIVER_COUNT = 50
DRIVER_PREFIX = "DRV"
EMT_COUNT = 50
EMT_PREFIX = "MS"
EMPLOYEE_SEQUENCE_DIGITS = 5

# Month picker shows this many years on each side of the current one.
YEAR_PICKER_SPAN = 5

MISSING_VALUE = "-"
# Stands in for a payload that marks a day non-present without saying why.
MISSING_REASON = "No reason given"

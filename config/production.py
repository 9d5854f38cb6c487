import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ROSTER_PATH = os.getenv("ROSTER_PATH", "UserAttendance.json")

GENERATOR_SEED = os.getenv("GENERATOR_SEED", "")
WINDOW_START = os.getenv("WINDOW_START", "2025-01-01")

import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ROSTER_PATH = os.getenv("ROSTER_PATH", "")

GENERATOR_SEED = "1"
WINDOW_START = "2025-01-01"

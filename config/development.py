import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# JSON payload with "drivers" and "emts"; empty means serve generated data
ROSTER_PATH = os.getenv("ROSTER_PATH", "")

# Fixed seed keeps generated demo data stable across restarts
GENERATOR_SEED = os.getenv("GENERATOR_SEED", "2025")
WINDOW_START = os.getenv("WINDOW_START", "2025-01-01")

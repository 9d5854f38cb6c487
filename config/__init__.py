"""Settings selection.

``APP_ENV`` names the environment; each one maps to a settings module in
this package. Unknown names fall back to development.
"""
import os

DEFAULT_ENV = "development"

SETTINGS_MODULES = {
    "development": "config.development",
    "testing": "config.testing",
    "production": "config.production",
}

ENV_ALIASES = {
    "dev": "development",
    "test": "testing",
    "prod": "production",
}


def current_env() -> str:
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    env = ENV_ALIASES.get(env, env)
    return env if env in SETTINGS_MODULES else DEFAULT_ENV


def get_settings_module() -> str:
    return SETTINGS_MODULES[current_env()]

"""
Configuration for certjson.
Values come from the environment; CLI flags override per run.
"""

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def _env_flag(name):
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_log_level(name):
    level = os.getenv(name, DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level, None
    return DEFAULT_LOG_LEVEL, level


class Settings:
    # Input sentinel meaning standard input
    STDIN_SENTINEL = "-"

    # Base name used when no positional argument is given
    DEFAULT_BASE_NAME = "cert"

    def __init__(self):
        # Logging; an unknown level falls back to the default and is reported once logging is up
        self.log_level, self.rejected_log_level = _env_log_level("CERTJSON_LOG_LEVEL")
        self.dev_mode = _env_flag("CERTJSON_DEV_MODE")


# Singleton instance
_settings = None


def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings():
    global _settings
    _settings = None

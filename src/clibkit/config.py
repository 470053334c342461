"""Configuration utilities for clibkit.

This module centralizes the environment variables clibkit reads. Values are
read at call time so tests (and long-running callers) can change them.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "clibkit"

DEBUG_ENV_VAR = "CLIBKIT_DEBUG"  # pragma: no mutate
LOG_PATH_ENV_VAR = "CLIBKIT_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV_VAR = "CLIBKIT_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate
LOGGER_LEVELS_ENV_VAR = "CLIBKIT_LOGGER_LEVELS"  # pragma: no mutate

_FALSY = {"0", "false", "no", "off"}


def debug_enabled() -> bool:
    """Return True when debug logging is switched on through the environment.

    Any non-empty value of `CLIBKIT_DEBUG` enables it, except the usual
    spellings of "off" (``0``, ``false``, ``no``, ``off``; case-insensitive).
    """
    value = os.environ.get(DEBUG_ENV_VAR, "").strip().lower()
    return bool(value) and value not in _FALSY


def default_log_path() -> Path:
    """Return the default flight-recorder file, creating its directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"

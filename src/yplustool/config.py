"""
Configuration & Global Constants
================================
This module serves as the central registry for application constants and
the environment-driven runtime settings.

Exports:
    VISIBLE_APP_NAME (str): Window title.
    WINDOW_SIZE (tuple): Initial window size in pixels.
    LOG_LEVEL_ENV / LOG_FILE_ENV (str): Environment variables read at startup.
"""
import logging
import os
from typing import Optional, Tuple

ORG_ID = "yplustool"
APP_ID = "yplus-tool"
VISIBLE_APP_NAME = "Y+ tool"

WINDOW_SIZE: Tuple[int, int] = (380, 210)

LOG_LEVEL_ENV = "YPLUS_LOG_LEVEL"
LOG_FILE_ENV = "YPLUS_LOG_FILE"
DEFAULT_LOG_LEVEL = logging.WARNING


def log_level_from_env(default: int = DEFAULT_LOG_LEVEL) -> int:
    """
    Resolve the logging level from the environment (e.g. YPLUS_LOG_LEVEL=debug).
    Unknown names fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level

    print(f"WARNING: Unknown log level {name!r} in {LOG_LEVEL_ENV}, using default.")
    return default


def log_file_from_env() -> Optional[str]:
    return os.environ.get(LOG_FILE_ENV) or None

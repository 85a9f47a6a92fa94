"""Configuration for whiteboard."""

from .constants import (
    MAX_PANELS_PER_ROW,
    MAX_ROWS,
    MIN_SIZE_PCT,
    SIZE_TOLERANCE,
)
from .settings import get_config_dir, get_env_var, get_log_level

__all__ = [
    "MAX_PANELS_PER_ROW",
    "MAX_ROWS",
    "MIN_SIZE_PCT",
    "SIZE_TOLERANCE",
    "get_config_dir",
    "get_env_var",
    "get_log_level",
]

"""
Centralized constants for whiteboard.

Grid limits live here so the layout engine, the terminal host and the
tests all agree on the same numbers.
"""

from pathlib import Path
from typing import Any, Dict

# =============================================================================
# GRID LIMITS
# =============================================================================

MAX_ROWS = 3  # Rows in a grid
MAX_PANELS_PER_ROW = 3  # Panels in a single row
MIN_SIZE_PCT = 10.0  # Smallest height/width a resize may leave a sibling at
SIZE_TOLERANCE = 1e-6  # Allowed drift when summing percentages to 100

# Rows/panels created for a fresh grid
DEFAULT_ROW_COUNT = 2
DEFAULT_PANELS_PER_ROW = 2

# =============================================================================
# PATHS
# =============================================================================

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "whiteboard"
UI_CONFIG_FILENAME = "ui_config.json"
LOG_FILENAME = "whiteboard.log"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "WHITEBOARD_CONFIG_DIR": {
        "description": "Directory holding ui_config.json and the log file",
        "default": None,
        "valid_values": None,
    },
    "WHITEBOARD_LOG_LEVEL": {
        "description": "Log level for the whiteboard.* loggers",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}

"""
Whiteboard UI configuration.

Handles persistence of UI preferences (theme, the directory the open-file
prompt starts in). The grid layout itself is never saved.
Config is stored in <config dir>/ui_config.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import UI_CONFIG_FILENAME
from .settings import get_config_dir

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": "textual-dark",
    "start_dir": None,
}


def get_ui_config_path() -> Path:
    """Get path to UI config file."""
    return get_config_dir() / UI_CONFIG_FILENAME


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable UI config {path}: {e}")
            return DEFAULT_CONFIG.copy()
        if not isinstance(config, dict):
            logger.warning(f"Ignoring UI config {path}: expected an object")
            return DEFAULT_CONFIG.copy()
        return {**DEFAULT_CONFIG, **config}
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Preferences are non-critical
        logger.warning(f"Could not save UI config to {path}: {e}")


def get_theme() -> str:
    """Get current theme name from config."""
    return str(load_ui_config().get("theme") or DEFAULT_CONFIG["theme"])


def set_theme(theme_name: str) -> None:
    """Set and persist theme preference."""
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def get_start_dir() -> Path:
    """Directory the open-file prompt starts in (defaults to the cwd)."""
    start_dir = load_ui_config().get("start_dir")
    if start_dir:
        path = Path(start_dir).expanduser()
        if path.is_dir():
            return path
    return Path.cwd()

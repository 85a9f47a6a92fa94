"""Environment-driven settings for whiteboard."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import DEFAULT_CONFIG_DIR, ENV_VAR_DEFINITIONS


def get_config_dir() -> Path:
    """Get the config directory, respecting WHITEBOARD_CONFIG_DIR.

    Tests point WHITEBOARD_CONFIG_DIR at a temp directory so they never
    touch the user's real preferences or log file.
    """
    override = os.environ.get("WHITEBOARD_CONFIG_DIR")
    config_dir = Path(override) if override else DEFAULT_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS or value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error or "Invalid value", setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_log_level() -> int:
    """Resolve WHITEBOARD_LOG_LEVEL to a logging level number."""
    level_name = (get_env_var("WHITEBOARD_LOG_LEVEL") or "INFO").upper()
    return logging.getLevelName(level_name)

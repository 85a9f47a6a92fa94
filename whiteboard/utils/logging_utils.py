"""Logging utilities for whiteboard.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The terminal host owns the screen, so log records go to a rotating file in
the config directory instead of stderr. `setup_tui_logging()` is called once
by the CLI before the app starts.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..config.constants import LOG_FILENAME
from ..config.settings import get_config_dir, get_log_level

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler() -> RotatingFileHandler:
    log_file = get_config_dir() / LOG_FILENAME
    handler = RotatingFileHandler(
        log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to the whiteboard log file.

    Only for code that may run standalone; everything else should use
    logging.getLogger(__name__) and rely on setup_tui_logging().
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.addHandler(_file_handler())
        logger.setLevel(get_log_level())

    return logger


def setup_tui_logging(verbose: bool = False, level: Optional[int] = None) -> logging.Logger:
    """
    Route whiteboard.* loggers to the rotating log file.

    The root logger stays at WARNING to keep third-party noise out;
    whiteboard's own loggers use WHITEBOARD_LOG_LEVEL, or DEBUG when
    verbose is set.

    Returns:
        The configured "whiteboard" package logger
    """
    if level is None:
        level = logging.DEBUG if verbose else get_log_level()

    package_logger = logging.getLogger("whiteboard")
    package_logger.setLevel(level)

    if not any(isinstance(h, RotatingFileHandler) for h in package_logger.handlers):
        package_logger.addHandler(_file_handler())

    logging.getLogger().setLevel(logging.WARNING)
    return package_logger

"""Tests for log file routing."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from whiteboard.utils.logging_utils import setup_tui_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("whiteboard")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    root_level = logging.getLogger().level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
    logging.getLogger().setLevel(root_level)


class TestSetupTuiLogging:
    """Tests for setup_tui_logging."""

    def test_writes_to_config_dir(self, package_logger, isolated_config_dir):
        logger = setup_tui_logging()
        assert logger is package_logger
        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(isolated_config_dir / "whiteboard.log")

    def test_level_from_env(self, package_logger, monkeypatch):
        monkeypatch.setenv("WHITEBOARD_LOG_LEVEL", "WARNING")
        assert setup_tui_logging().level == logging.WARNING

    def test_verbose(self, package_logger):
        assert setup_tui_logging(verbose=True).level == logging.DEBUG

    def test_explicit_level_wins(self, package_logger):
        assert setup_tui_logging(verbose=True, level=logging.ERROR).level == logging.ERROR

    def test_idempotent(self, package_logger):
        setup_tui_logging()
        setup_tui_logging()
        handlers = [h for h in package_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1

    def test_records_reach_file(self, package_logger, isolated_config_dir):
        setup_tui_logging(verbose=True)
        logging.getLogger("whiteboard.grid.resize").debug("drag started")
        for handler in package_logger.handlers:
            handler.flush()
        assert "drag started" in (isolated_config_dir / "whiteboard.log").read_text()

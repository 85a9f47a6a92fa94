"""Shared pytest fixtures for whiteboard tests."""

import pytest

from whiteboard.grid.model import IdGenerator, default_grid
from whiteboard.grid.session import GridSession


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/whiteboard."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("WHITEBOARD_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("WHITEBOARD_LOG_LEVEL", raising=False)
    return config_dir


@pytest.fixture
def ids():
    return IdGenerator()


@pytest.fixture
def grid(ids):
    """The default 2x2 grid."""
    return default_grid(ids)


@pytest.fixture
def session():
    return GridSession(ids=IdGenerator())

"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from patternplayer.models import PlayerConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def lines():
    """Collected output lines."""
    return []


@pytest.fixture
def emit(lines):
    """Emitter that records every announced line."""
    return lines.append


@pytest.fixture
def default_config():
    """The built-in demo configuration."""
    return PlayerConfig()


@pytest.fixture
def config_file(temp_dir):
    """Write a config file and return its path."""
    def _write(content: str, name: str = "player.json") -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path
    return _write

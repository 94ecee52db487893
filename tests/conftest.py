"""Shared fixtures."""

import pytest

from tksq.dictionaries import DictionaryLoader
from tksq.types import StageOptions


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Keep every test away from the real user config directory."""
    home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home))
    return home


@pytest.fixture
def en():
    return DictionaryLoader.load("general", "en")


@pytest.fixture
def ru():
    return DictionaryLoader.load("general", "ru")


@pytest.fixture
def programming():
    return DictionaryLoader.load("programming", "en")


@pytest.fixture
def make_options():
    def _make(dictionary, level="medium", content_type="auto"):
        return StageOptions(level=level, dictionary=dictionary, content_type=content_type)

    return _make

"""Tests for the user config layer."""

import json
import sys

import pytest

from tksq.config import ConfigManager, LearningConfig, TksqConfig, default_config_dir, merge_config


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path)


class TestDefaults:
    def test_values(self):
        config = TksqConfig()
        assert config.level == "medium"
        assert config.tokenizer == "cl100k_base"
        assert config.domain == "general"
        assert config.language == "auto"
        assert config.content_type == "auto"
        assert config.preserve_patterns == []
        assert config.custom_substitutions == {}
        assert config.learning == LearningConfig()

    def test_learning_defaults(self):
        learning = LearningConfig()
        assert learning.enabled is True
        assert learning.min_frequency == 5
        assert learning.auto_promote is False
        assert learning.max_candidates == 100

    @pytest.mark.parametrize("field", ["min_frequency", "max_candidates"])
    def test_learning_bounds(self, field):
        with pytest.raises(ValueError):
            LearningConfig(**{field: 0})

    def test_missing_file(self, manager):
        assert manager.load() == TksqConfig()


class TestLoadSave:
    def test_round_trip(self, tmp_path, manager):
        manager.save(TksqConfig(level="aggressive", custom_substitutions={"foo": "f"}))
        loaded = ConfigManager(tmp_path).load()
        assert loaded.level == "aggressive"
        assert loaded.custom_substitutions == {"foo": "f"}

    def test_load_is_cached(self, manager):
        first = manager.load()
        manager.config_path().parent.mkdir(parents=True, exist_ok=True)
        manager.config_path().write_text(json.dumps({"level": "light"}), encoding="utf-8")
        assert manager.load() is first
        manager.clear_cache()
        assert manager.load().level == "light"

    def test_partial_document_merged_with_defaults(self, manager):
        manager.config_path().write_text(
            json.dumps({"level": "light", "learning": {"min_frequency": 2}}), encoding="utf-8"
        )
        config = manager.load()
        assert config.level == "light"
        assert config.learning.min_frequency == 2
        assert config.learning.enabled is True
        assert config.tokenizer == "cl100k_base"

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]", '{"level": "extreme"}'])
    def test_invalid_file_gives_defaults(self, manager, caplog, content):
        manager.config_path().write_text(content, encoding="utf-8")
        assert manager.load() == TksqConfig()
        assert "using defaults" in caplog.text


class TestUpdate:
    def test_merges_substitutions(self, manager):
        manager.update(custom_substitutions={"foo": "f"})
        config = manager.update(custom_substitutions={"bar": "b"})
        assert config.custom_substitutions == {"foo": "f", "bar": "b"}

    def test_merges_learning(self, manager):
        manager.update(learning={"min_frequency": 3})
        config = manager.update(learning={"auto_promote": True})
        assert config.learning.min_frequency == 3
        assert config.learning.auto_promote is True

    def test_replaces_lists(self, manager):
        manager.update(preserve_patterns=["a"])
        assert manager.update(preserve_patterns=["b"]).preserve_patterns == ["b"]

    def test_persists(self, tmp_path, manager):
        manager.update(level="light")
        assert ConfigManager(tmp_path).load().level == "light"

    def test_invalid_value_raises(self, manager):
        with pytest.raises(ValueError):
            manager.update(level="extreme")
        assert manager.load().level == "medium"


class TestConfigDir:
    @pytest.mark.skipif(sys.platform == "win32", reason="APPDATA wins on Windows")
    def test_xdg(self, isolated_config_home):
        assert default_config_dir() == isolated_config_home / "tksq"
        assert ConfigManager().config_path() == isolated_config_home / "tksq" / "config.json"

    @pytest.mark.skipif(sys.platform == "win32", reason="APPDATA wins on Windows")
    def test_home_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_dir() == tmp_path / ".config" / "tksq"

    def test_explicit_dir(self, tmp_path):
        assert ConfigManager(tmp_path).config_dir() == tmp_path


def test_merge_config():
    merged = merge_config(
        {"level": "medium", "custom_substitutions": {"a": "1"}},
        {"custom_substitutions": {"b": "2"}, "level": "light"},
    )
    assert merged == {"level": "light", "custom_substitutions": {"a": "1", "b": "2"}}

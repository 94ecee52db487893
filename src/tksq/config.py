"""User configuration, stored as JSON in the platform config directory."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from tksq.types import CompressionLevel, ContentType, TokenizerType

logger = logging.getLogger(__name__)

APP_NAME = "tksq"
CONFIG_FILENAME = "config.json"

# Fields merged key by key on update instead of being replaced.
_MERGED_FIELDS = ("custom_substitutions", "learning")


class LearningConfig(BaseModel):
    enabled: bool = True
    min_frequency: int = Field(default=5, ge=1)
    auto_promote: bool = False
    max_candidates: int = Field(default=100, ge=1)


class TksqConfig(BaseModel):
    level: CompressionLevel = "medium"
    tokenizer: TokenizerType = "cl100k_base"
    domain: str = "general"
    language: str = "auto"          # "auto" or a language pack code
    content_type: ContentType = "auto"
    preserve_patterns: list[str] = Field(default_factory=list)
    custom_substitutions: dict[str, str] = Field(default_factory=dict)
    learning: LearningConfig = Field(default_factory=LearningConfig)


def default_config_dir() -> Path:
    """``%APPDATA%/tksq`` on Windows, else ``$XDG_CONFIG_HOME/tksq`` or ``~/.config/tksq``."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME


def merge_config(base: dict[str, Any], partial: dict[str, Any]) -> dict[str, Any]:
    """Overlay *partial* on *base*; dict-valued settings merge per key."""
    merged = dict(base)
    for key, value in partial.items():
        if key in _MERGED_FIELDS and isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


class ConfigManager:
    def __init__(self, config_dir: Path | str | None = None) -> None:
        self._config_dir = Path(config_dir) if config_dir is not None else None
        self._cached: TksqConfig | None = None

    def config_dir(self) -> Path:
        return self._config_dir if self._config_dir is not None else default_config_dir()

    def config_path(self) -> Path:
        return self.config_dir() / CONFIG_FILENAME

    def load(self) -> TksqConfig:
        """Load the stored config, or defaults if there is none usable."""
        if self._cached is None:
            self._cached = self._read()
        return self._cached

    def _read(self) -> TksqConfig:
        path = self.config_path()
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return TksqConfig()
        except OSError as e:
            logger.warning("Could not read %s, using defaults: %s", path, e)
            return TksqConfig()
        try:
            stored = json.loads(raw)
            if not isinstance(stored, dict):
                raise ValueError("top-level value is not an object")
            return TksqConfig.model_validate(merge_config(TksqConfig().model_dump(), stored))
        except ValueError as e:
            logger.warning("Ignoring invalid config %s, using defaults: %s", path, e)
            return TksqConfig()

    def save(self, config: TksqConfig) -> None:
        path = self.config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
        self._cached = config

    def update(self, **partial: Any) -> TksqConfig:
        """Merge *partial* into the stored config and save it.

        Raises:
            pydantic.ValidationError: If the merged config is invalid.
        """
        config = TksqConfig.model_validate(merge_config(self.load().model_dump(), partial))
        self.save(config)
        return config

    def clear_cache(self) -> None:
        self._cached = None

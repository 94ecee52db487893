"""Shared data types for the compression pipeline."""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from tksq.dictionaries.loader import SubstitutionDictionary


CompressionLevel = Literal["light", "medium", "aggressive"]
ContentType = Literal["code", "prose", "structured", "auto"]
TokenizerType = Literal["cl100k_base", "o200k_base", "approximate"]

LEVELS: tuple[str, ...] = ("light", "medium", "aggressive")
CONTENT_TYPES: tuple[str, ...] = ("auto", "prose", "code", "structured")
TOKENIZERS: tuple[str, ...] = ("cl100k_base", "o200k_base", "approximate")


@dataclasses.dataclass(frozen=True, slots=True)
class PreservedRegion:
    """A span of input replaced by a placeholder while the stages run."""

    start: int              # position in the ORIGINAL input
    end: int                # position in the ORIGINAL input
    placeholder: str
    original_text: str


@dataclasses.dataclass(frozen=True, slots=True)
class Change:
    """One rewrite performed by a stage."""

    original: str
    replacement: str
    position: int
    rule: str               # "<stage>:<rule kind>", e.g. "semantic:substitution"


@dataclasses.dataclass(slots=True)
class StageResult:
    text: str
    changes: list[Change] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(frozen=True, slots=True)
class StageOptions:
    """Everything a stage needs besides the text itself."""

    level: CompressionLevel
    dictionary: SubstitutionDictionary
    preserved_regions: tuple[PreservedRegion, ...] = ()
    content_type: ContentType = "auto"

    @property
    def is_prose(self) -> bool:
        """Whether dictionary-driven rewrites may touch the text."""
        return self.content_type not in ("code", "structured")


@dataclasses.dataclass(frozen=True, slots=True)
class StageStats:
    stage: str
    tokens_in: int
    tokens_out: int
    reduction_percent: float
    time_ms: float


@dataclasses.dataclass(frozen=True, slots=True)
class CompressionStats:
    original_tokens: int
    compressed_tokens: int
    reduction_percent: float
    original_chars: int
    compressed_chars: int
    stage_breakdown: tuple[StageStats, ...]
    tokenizer: str


@dataclasses.dataclass(slots=True)
class PipelineConfig:
    """Per-request pipeline settings."""

    level: CompressionLevel
    dictionary: SubstitutionDictionary
    tokenizer: TokenizerType = "approximate"
    preserve_patterns: list[str | re.Pattern[str]] = dataclasses.field(default_factory=list)
    stages: list[str] | None = None     # explicit stage ids, bypasses level selection
    content_type: ContentType = "auto"


@dataclasses.dataclass(frozen=True, slots=True)
class PipelineResult:
    compressed: str
    stats: CompressionStats
    changes: tuple[Change, ...]

    def __str__(self) -> str:
        return self.compressed


def reduction_percent(before: int, after: int) -> float:
    """Percentage reduction from *before* to *after*, rounded to two decimals."""
    if before <= 0:
        return 0.0
    return round((before - after) / before * 100, 2)

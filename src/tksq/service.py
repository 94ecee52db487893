"""High-level operations shared by the HTTP API and the benchmark script.

:class:`CompressionService` fills request gaps from the user config, resolves
the language, feeds promoted phrases back into the dictionary and keeps the
learning store up to date.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from tksq.config import ConfigManager, TksqConfig
from tksq.diff import DiffResult, TextDiffer
from tksq.dictionaries import DictionaryLoader, LanguageRegistry
from tksq.language import LanguageDetector
from tksq.learning import CandidatePattern, LearnedStats, PhraseStore, PhraseTracker
from tksq.pipeline import compress as run_pipeline
from tksq.preserver import compile_user_patterns
from tksq.tokenizer import TokenCounterFactory
from tksq.types import LEVELS, PipelineConfig, PipelineResult, StageStats

logger = logging.getLogger(__name__)

_DASHBOARD_LIMIT = 10


@dataclasses.dataclass(frozen=True, slots=True)
class ServiceResult:
    result: PipelineResult
    level: str
    domain: str
    language: str
    ready_suggestions: tuple[CandidatePattern, ...] = ()


@dataclasses.dataclass(frozen=True, slots=True)
class CountResult:
    tokens: int
    chars: int
    words: int
    lines: int
    tokenizer: str

    @property
    def chars_per_token(self) -> float:
        return round(self.chars / self.tokens, 1) if self.tokens else 0.0


@dataclasses.dataclass(frozen=True, slots=True)
class DiffReport:
    diff: DiffResult
    compressed: str
    original_tokens: int | None = None      # set only when the service compressed
    compressed_tokens: int | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class BenchmarkRow:
    level: str
    tokens: int
    reduction_percent: float
    stages: tuple[str, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class BenchmarkReport:
    original_tokens: int
    original_chars: int
    domain: str
    language: str
    tokenizer: str
    rows: tuple[BenchmarkRow, ...]
    aggressive_breakdown: tuple[StageStats, ...]


def average_reduction(stats: LearnedStats) -> float:
    """Character reduction over every compression so far, in percent."""
    if stats.total_chars_before <= 0:
        return 0.0
    saved = stats.total_chars_before - stats.total_chars_after
    return round(saved / stats.total_chars_before * 100, 1)


def format_pack(result: PipelineResult) -> str:
    stats = result.stats
    return (
        f"{result.compressed}\n\n"
        f"[packed: {stats.original_tokens}->{stats.compressed_tokens} tokens, "
        f"-{stats.reduction_percent}%]"
    )


class CompressionService:
    def __init__(self, config_manager: ConfigManager, store: PhraseStore) -> None:
        self.config_manager = config_manager
        self.store = store
        self._tracker: PhraseTracker | None = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def config(self) -> TksqConfig:
        return self.config_manager.load()

    def tracker(self) -> PhraseTracker:
        """The phrase tracker, created on first use (one per session)."""
        if self._tracker is None:
            self._tracker = PhraseTracker(self.store, self.config.learning)
            self.store.increment_session_count()
        return self._tracker

    @staticmethod
    def resolve_language(setting: str, text: str) -> str:
        if setting == "auto":
            return LanguageDetector.detect(text)
        LanguageRegistry.get(setting)
        return setting

    def _substitutions(self, config: TksqConfig) -> dict[str, str]:
        # User entries win over promoted ones.
        return {**self.store.get_promoted(), **config.custom_substitutions}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def compress(
        self,
        text: str,
        level: str | None = None,
        domain: str | None = None,
        language: str | None = None,
        tokenizer: str | None = None,
        preserve_patterns: list[str] | None = None,
        content_type: str | None = None,
        stages: list[str] | None = None,
    ) -> ServiceResult:
        """Compress *text*, learning from it when learning is enabled.

        Arguments left as ``None`` come from the user config.

        Raises:
            ValueError: If the level, domain, language, tokenizer, content
                type or a stage id is unknown.
        """
        config = self.config
        level = level or config.level
        domain = domain or config.domain
        language = self.resolve_language(language or config.language, text)

        dictionary = DictionaryLoader.load(domain, language, self._substitutions(config) or None)
        patterns = preserve_patterns if preserve_patterns is not None else config.preserve_patterns
        result = run_pipeline(
            text,
            PipelineConfig(
                level=level,
                dictionary=dictionary,
                tokenizer=tokenizer or config.tokenizer,
                preserve_patterns=compile_user_patterns(patterns),
                stages=stages,
                content_type=content_type or config.content_type,
            ),
        )

        ready: tuple[CandidatePattern, ...] = ()
        if config.learning.enabled:
            stats = result.stats
            self.store.update_stats(
                stats.original_tokens - stats.compressed_tokens,
                stats.original_chars,
                stats.compressed_chars,
            )
            tracker = self.tracker()
            tracker.analyze_text(text)
            self.store.flush()
            ready = tuple(tracker.get_ready_suggestions())

        return ServiceResult(result, level, domain, language, ready)

    def pack(self, text: str, level: str = "medium", language: str | None = None) -> str:
        """Compress and append a one-line token summary."""
        return format_pack(self.compress(text, level=level, language=language).result)

    def count(self, text: str, tokenizer: str | None = None) -> CountResult:
        counter = TokenCounterFactory.create_ready(tokenizer or self.config.tokenizer)
        return CountResult(
            tokens=counter.count(text),
            chars=len(text),
            words=len(text.split()),
            lines=len(text.split("\n")),
            tokenizer=counter.name,
        )

    def diff(
        self,
        original: str,
        compressed: str | None = None,
        level: str | None = None,
        domain: str | None = None,
        language: str | None = None,
    ) -> DiffReport:
        """Diff *original* against *compressed*, compressing it first if omitted."""
        if compressed is not None:
            return DiffReport(TextDiffer.diff(original, compressed), compressed)

        config = self.config
        resolved = self.resolve_language(language or config.language, original)
        dictionary = DictionaryLoader.load(
            domain or config.domain, resolved, config.custom_substitutions or None
        )
        result = run_pipeline(
            original,
            PipelineConfig(
                level=level or config.level,
                dictionary=dictionary,
                tokenizer=config.tokenizer,
            ),
        )
        return DiffReport(
            TextDiffer.diff(original, result.compressed),
            result.compressed,
            result.stats.original_tokens,
            result.stats.compressed_tokens,
        )

    def benchmark(
        self,
        text: str,
        domain: str | None = None,
        language: str | None = None,
        tokenizer: str | None = None,
    ) -> BenchmarkReport:
        """Compress *text* at every level and compare the results."""
        config = self.config
        domain = domain or config.domain
        tokenizer = tokenizer or config.tokenizer
        resolved = self.resolve_language(language or config.language, text)
        dictionary = DictionaryLoader.load(domain, resolved)
        counter = TokenCounterFactory.create_ready(tokenizer)

        rows: list[BenchmarkRow] = []
        breakdown: tuple[StageStats, ...] = ()
        for level in LEVELS:
            result = run_pipeline(
                text, PipelineConfig(level=level, dictionary=dictionary, tokenizer=tokenizer)
            )
            rows.append(
                BenchmarkRow(
                    level=level,
                    tokens=result.stats.compressed_tokens,
                    reduction_percent=result.stats.reduction_percent,
                    stages=tuple(s.stage for s in result.stats.stage_breakdown),
                )
            )
            if level == "aggressive":
                breakdown = result.stats.stage_breakdown

        return BenchmarkReport(
            original_tokens=counter.count(text),
            original_chars=len(text),
            domain=domain,
            language=resolved,
            tokenizer=counter.name,
            rows=tuple(rows),
            aggressive_breakdown=breakdown,
        )

    def update_config(self, **partial: Any) -> TksqConfig:
        """Persist *partial* config changes; the tracker picks them up next use.

        Raises:
            ValueError: If a setting has an unknown value.
        """
        domain = partial.get("domain")
        if domain is not None and domain not in DictionaryLoader.available_domains():
            available = ", ".join(DictionaryLoader.available_domains())
            raise ValueError(f"Unknown domain: {domain}. Available: {available}")
        language = partial.get("language")
        if language is not None and language != "auto":
            LanguageRegistry.get(language)
        updated = self.config_manager.update(**partial)
        self._tracker = None
        return updated

    # ------------------------------------------------------------------
    # Learning
    # ------------------------------------------------------------------

    def learn_candidates(self) -> list[CandidatePattern]:
        return self.store.get_candidates()

    def learn_promote(self, phrase: str, replacement: str | None = None) -> str:
        """Promote *phrase*, using its suggestion when no replacement is given.

        Raises:
            ValueError: If there is neither a replacement nor a suggestion.
        """
        if not replacement:
            candidate = self.store.get_candidate(phrase)
            replacement = candidate.suggested_replacement if candidate else None
        if not replacement:
            raise ValueError(f"No replacement available for {phrase!r}. Provide one explicitly.")
        self.store.promote(phrase, replacement)
        logger.info("Promoted %r -> %r", phrase, replacement)
        return replacement

    def learn_reject(self, phrase: str) -> bool:
        return self.store.reject(phrase)

    def learn_add(self, phrase: str, replacement: str) -> None:
        """Add a manual pattern straight to the promoted set."""
        if not phrase or not replacement:
            raise ValueError("Both phrase and replacement are required.")
        self.store.promote(phrase, replacement)

    def learn_reset(self) -> None:
        self.store.reset()
        self._tracker = None

    def learn_stats(self) -> dict[str, Any]:
        stats = self.store.get_stats()
        return {
            **stats.model_dump(),
            "average_reduction_percent": average_reduction(stats),
            "candidates": len(self.store.get_candidates()),
            "promoted": len(self.store.get_promoted()),
        }

    def dashboard(self) -> dict[str, Any]:
        config = self.config
        candidates = self.store.get_candidates()
        promoted = self.store.get_promoted()
        ready = self.store.get_ready_candidates(config.learning.min_frequency)

        dictionaries = {}
        for code in LanguageRegistry.available_languages():
            dictionary = DictionaryLoader.load(config.domain, code)
            dictionaries[code] = {
                "abbreviations": len(dictionary.abbreviations),
                "substitutions": len(dictionary.substitutions),
                "fillers": len(dictionary.fillers),
                "redundancies": len(dictionary.redundancies),
            }

        return {
            "stats": self.learn_stats(),
            "config": config.model_dump(),
            "candidates": len(candidates),
            "ready": [c.model_dump() for c in ready[:_DASHBOARD_LIMIT]],
            "ready_total": len(ready),
            "promoted": dict(list(promoted.items())[:_DASHBOARD_LIMIT]),
            "promoted_total": len(promoted),
            "dictionaries": dictionaries,
        }

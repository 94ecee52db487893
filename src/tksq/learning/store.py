"""Candidate and promoted phrases, persisted through a pluggable backend.

The store loads lazily on first access and keeps the loaded data in memory;
mutations mark it dirty and :meth:`PhraseStore.flush` writes it back. There
is no locking: two processes sharing one file can lose each other's updates.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from tksq.config import default_config_dir
from tksq.learning.models import CandidatePattern, LearnedData, LearnedStats, utc_now

logger = logging.getLogger(__name__)

LEARNED_FILENAME = "learned.json"


class StorageBackend(Protocol):
    def read(self) -> str | None: ...

    def write(self, data: str) -> None: ...


class JsonFileBackend:
    """One JSON document on disk. A missing file reads as ``None``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, data: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(data, encoding="utf-8")
        os.replace(tmp, self.path)


class MemoryBackend:
    def __init__(self, data: str | None = None) -> None:
        self.data = data

    def read(self) -> str | None:
        return self.data

    def write(self, data: str) -> None:
        self.data = data


class PhraseStore:
    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        self._data: LearnedData | None = None
        self._dirty = False

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> LearnedData:
        if self._data is None:
            self._data = self._read()
        return self._data

    def _read(self) -> LearnedData:
        raw = self._backend.read()
        if raw is None:
            return LearnedData()
        try:
            return LearnedData.model_validate_json(raw)
        except ValueError as e:
            logger.warning("Learned data is unreadable, starting empty: %s", e)
            return LearnedData()

    def _touch(self) -> None:
        self._dirty = True

    def save(self) -> None:
        """Write the data back if anything changed since the last save."""
        if self._data is None or not self._dirty:
            return
        self._backend.write(self._data.model_dump_json(indent=2))
        self._dirty = False

    def flush(self) -> None:
        if self._dirty:
            logger.debug("Flushing learned data")
        self.save()

    # ------------------------------------------------------------------
    # Candidates
    # ------------------------------------------------------------------

    def add_candidate(
        self,
        phrase: str,
        suggested_replacement: str | None = None,
        max_candidates: int = 100,
    ) -> CandidatePattern:
        """Record one observation of *phrase*.

        A new phrase starts at count 1; a known one is incremented. The first
        non-empty suggestion sticks. When the set grows past
        *max_candidates*, the least frequent (oldest first among equals) are
        evicted.
        """
        data = self.load()
        key = phrase.lower()
        now = utc_now()
        candidate = data.candidates.get(key)
        if candidate is None:
            candidate = CandidatePattern(
                phrase=phrase,
                suggested_replacement=suggested_replacement,
                first_seen=now,
                last_seen=now,
            )
            data.candidates[key] = candidate
        else:
            candidate.count += 1
            candidate.last_seen = now
            if candidate.suggested_replacement is None and suggested_replacement:
                candidate.suggested_replacement = suggested_replacement
        self._evict(max_candidates)
        self._touch()
        return candidate

    def _evict(self, max_candidates: int) -> None:
        candidates = self.load().candidates
        overflow = len(candidates) - max_candidates
        if overflow <= 0:
            return
        # sorted() is stable: equal (count, last_seen) keep insertion order.
        ranked = sorted(candidates.items(), key=lambda item: (item[1].count, item[1].last_seen))
        for key, _ in ranked[:overflow]:
            del candidates[key]

    def promote(self, phrase: str, replacement: str) -> None:
        data = self.load()
        key = phrase.lower()
        data.promoted[key] = replacement
        data.candidates.pop(key, None)
        self._touch()
        self.save()

    def reject(self, phrase: str) -> bool:
        data = self.load()
        removed = data.candidates.pop(phrase.lower(), None) is not None
        if removed:
            self._touch()
            self.save()
        return removed

    def get_candidates(self) -> list[CandidatePattern]:
        return sorted(self.load().candidates.values(), key=lambda c: c.count, reverse=True)

    def get_candidate(self, phrase: str) -> CandidatePattern | None:
        return self.load().candidates.get(phrase.lower())

    def get_ready_candidates(self, min_frequency: int) -> list[CandidatePattern]:
        return [
            c
            for c in self.get_candidates()
            if c.count >= min_frequency and c.suggested_replacement is not None
        ]

    def get_promoted(self) -> dict[str, str]:
        return dict(self.load().promoted)

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def update_stats(self, tokens_saved: int, chars_before: int, chars_after: int) -> None:
        stats = self.load().stats
        stats.total_compressions += 1
        stats.total_tokens_saved += max(0, tokens_saved)
        stats.total_chars_before += chars_before
        stats.total_chars_after += chars_after
        self._touch()

    def get_stats(self) -> LearnedStats:
        return self.load().stats.model_copy()

    def increment_session_count(self) -> None:
        self.load().stats.session_count += 1
        self._touch()
        self.save()

    def reset(self) -> None:
        self._data = LearnedData()
        self._touch()
        self.save()


def default_store(config_dir: Path | str | None = None) -> PhraseStore:
    """A file-backed store next to the user config."""
    base = Path(config_dir) if config_dir is not None else default_config_dir()
    return PhraseStore(JsonFileBackend(base / LEARNED_FILENAME))

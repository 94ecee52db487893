"""Persisted learning data."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

LEARNED_DATA_VERSION = 1


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CandidatePattern(BaseModel):
    """A phrase seen repeatedly, waiting to be promoted or rejected."""

    phrase: str
    suggested_replacement: str | None = None
    count: int = 1
    first_seen: str = Field(default_factory=utc_now)   # ISO-8601, UTC
    last_seen: str = Field(default_factory=utc_now)


class LearnedStats(BaseModel):
    total_compressions: int = 0
    total_tokens_saved: int = 0
    total_chars_before: int = 0
    total_chars_after: int = 0
    session_count: int = 0


class LearnedData(BaseModel):
    version: int = LEARNED_DATA_VERSION
    candidates: dict[str, CandidatePattern] = Field(default_factory=dict)   # lower-cased phrase -> candidate
    promoted: dict[str, str] = Field(default_factory=dict)                  # lower-cased phrase -> replacement
    stats: LearnedStats = Field(default_factory=LearnedStats)

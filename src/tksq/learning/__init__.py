"""Learn new substitutions from the text that passes through."""

from tksq.learning.models import CandidatePattern, LearnedData, LearnedStats
from tksq.learning.store import (
    JsonFileBackend,
    MemoryBackend,
    PhraseStore,
    StorageBackend,
    default_store,
)
from tksq.learning.tracker import PhraseTracker, TrackedPhrase, suggest_replacement

__all__ = [
    "CandidatePattern",
    "JsonFileBackend",
    "LearnedData",
    "LearnedStats",
    "MemoryBackend",
    "PhraseStore",
    "PhraseTracker",
    "StorageBackend",
    "TrackedPhrase",
    "default_store",
    "suggest_replacement",
]

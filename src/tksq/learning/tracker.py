"""Find repeating phrases in input text and propose shorthand for them."""

from __future__ import annotations

import dataclasses
import logging
import re
from collections import Counter

from tksq.config import LearningConfig
from tksq.learning.models import CandidatePattern
from tksq.learning.store import PhraseStore

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\s]|_")

_MIN_WORDS = 4
_NGRAM_SIZES = (2, 3, 4)
_MIN_PHRASE_CHARS = 8
_MIN_OCCURRENCES = 2
_MAX_PHRASES = 20

_MIN_ACRONYM_WORDS = 2
_MAX_ACRONYM_WORDS = 5
_MIN_LONG_WORD = 10

_SHORT_FORMS = {
    "configuration": "config",
    "implementation": "impl",
    "documentation": "docs",
    "application": "app",
    "information": "info",
    "development": "dev",
    "environment": "env",
    "management": "mgmt",
    "performance": "perf",
    "repository": "repo",
    "authentication": "auth",
    "authorization": "authz",
    "administrator": "admin",
    "specification": "spec",
    "infrastructure": "infra",
    "dependencies": "deps",
    "requirements": "reqs",
}


@dataclasses.dataclass(frozen=True, slots=True)
class TrackedPhrase:
    phrase: str
    session_count: int      # occurrences across every call in this process


def suggest_replacement(phrase: str) -> str | None:
    """Propose a short form for *phrase*, or ``None``.

    Phrases of 2-5 words get an upper-case acronym when it is under half the
    phrase's length. Single long words ending in a common long form
    ("misconfiguration") get that form's short version.
    """
    words = phrase.split()
    if _MIN_ACRONYM_WORDS <= len(words) <= _MAX_ACRONYM_WORDS:
        acronym = "".join(w[0] for w in words).upper()
        return acronym if len(acronym) < len(phrase) / 2 else None
    if len(words) == 1 and len(phrase) >= _MIN_LONG_WORD:
        lowered = phrase.lower()
        for long_form, short_form in _SHORT_FORMS.items():
            if lowered.endswith(long_form):
                return short_form
    return None


class PhraseTracker:
    def __init__(self, store: PhraseStore, config: LearningConfig) -> None:
        self.store = store
        self.config = config
        self._session_counts: Counter[str] = Counter()

    def analyze_text(self, text: str) -> list[TrackedPhrase]:
        """Record the phrases that repeat within *text*.

        Returns the recorded phrases, most frequent first, with their running
        count for this process. Does nothing when learning is disabled or the
        text has fewer than four words.
        """
        if not self.config.enabled:
            return []
        words = _NON_WORD_RE.sub(" ", text.lower()).split()
        if len(words) < _MIN_WORDS:
            return []

        ngrams: Counter[str] = Counter()
        for size in _NGRAM_SIZES:
            for i in range(len(words) - size + 1):
                ngram = " ".join(words[i:i + size])
                if len(ngram) >= _MIN_PHRASE_CHARS:
                    ngrams[ngram] += 1

        repeated = [(p, n) for p, n in ngrams.most_common() if n >= _MIN_OCCURRENCES]
        tracked: list[TrackedPhrase] = []
        for phrase, occurrences in repeated[:_MAX_PHRASES]:
            self._session_counts[phrase] += occurrences
            self.store.add_candidate(
                phrase,
                suggest_replacement(phrase),
                self.config.max_candidates,
            )
            tracked.append(TrackedPhrase(phrase, self._session_counts[phrase]))

        if self.config.auto_promote:
            for candidate in self.get_ready_suggestions():
                self.store.promote(candidate.phrase, candidate.suggested_replacement)
                logger.info(
                    "Promoted %r -> %r", candidate.phrase, candidate.suggested_replacement
                )
        return tracked

    def get_ready_suggestions(self) -> list[CandidatePattern]:
        return self.store.get_ready_candidates(self.config.min_frequency)

    @staticmethod
    def suggest_replacement(phrase: str) -> str | None:
        return suggest_replacement(phrase)

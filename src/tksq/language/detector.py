"""Script-based language detection."""

from __future__ import annotations

_SAMPLE_SIZE = 2000
_CYRILLIC_THRESHOLD = 0.3
_DEFAULT_LANGUAGE = "en"
_CYRILLIC_LANGUAGE = "ru"


def _is_cyrillic(ch: str) -> bool:
    return "\u0400" <= ch <= "\u04ff"


class LanguageDetector:
    """Pick a language pack from the share of Cyrillic letters in a sample.

    This is a two-outcome heuristic, not a language classifier.
    """

    @staticmethod
    def detect(text: str) -> str:
        sample = text[:_SAMPLE_SIZE]
        letters = [ch for ch in sample if ch.isalpha()]
        if not letters:
            return _DEFAULT_LANGUAGE

        cyrillic = sum(1 for ch in letters if _is_cyrillic(ch))
        if cyrillic / len(letters) > _CYRILLIC_THRESHOLD:
            return _CYRILLIC_LANGUAGE
        return _DEFAULT_LANGUAGE

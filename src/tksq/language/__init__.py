"""Script handling: word boundaries and language detection."""

from tksq.language.boundary import build_boundary_pattern, build_word_boundary_regex
from tksq.language.detector import LanguageDetector

__all__ = [
    "build_boundary_pattern",
    "build_word_boundary_regex",
    "LanguageDetector",
]

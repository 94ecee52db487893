"""Topical overlays layered on top of a language pack."""

from __future__ import annotations

from tksq.dictionaries.domains.academic import ACADEMIC_ABBREVIATIONS, ACADEMIC_SUBSTITUTIONS
from tksq.dictionaries.domains.legal import LEGAL_ABBREVIATIONS, LEGAL_SUBSTITUTIONS
from tksq.dictionaries.domains.programming import (
    PROGRAMMING_ABBREVIATIONS,
    PROGRAMMING_SUBSTITUTIONS,
)

Pairs = tuple[tuple[str, str], ...]

# domain -> (substitutions, abbreviations); "general" adds nothing.
DOMAIN_OVERLAYS: dict[str, tuple[Pairs, Pairs]] = {
    "general": ((), ()),
    "programming": (PROGRAMMING_SUBSTITUTIONS, PROGRAMMING_ABBREVIATIONS),
    "legal": (LEGAL_SUBSTITUTIONS, LEGAL_ABBREVIATIONS),
    "academic": (ACADEMIC_SUBSTITUTIONS, ACADEMIC_ABBREVIATIONS),
}

"""Language pack structure."""

from __future__ import annotations

import dataclasses
import re

from tksq.dictionaries.rules import Rule
from tksq.language.boundary import ScriptType


@dataclasses.dataclass(frozen=True, slots=True)
class ShorthandRules:
    """Shorthand transforms a language supports. Empty means "skip"."""

    contractions: tuple[Rule, ...] = ()
    articles: Rule | None = None
    copulas: tuple[Rule, ...] = ()
    deverbals: tuple[Rule, ...] = ()
    pronoun_elision: tuple[Rule, ...] = ()
    patronymic: Rule | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class LanguagePack:
    code: str
    script: ScriptType
    fillers: tuple[str, ...]
    substitutions: tuple[tuple[str, str], ...]
    redundancies: tuple[Rule, ...]
    shorthand: ShorthandRules
    capitalize_after_period: re.Pattern[str]

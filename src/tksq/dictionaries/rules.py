"""Rewrite rules as data.

Every rewrite the dictionaries describe is a :class:`Rule`. The stages never
build patterns themselves: they ask a rule to compile for the active script
and hand it to :func:`tksq.stages.base.apply_rule`.
"""

from __future__ import annotations

import dataclasses
import functools
import re
from collections.abc import Callable
from typing import Literal

from tksq.language.boundary import ScriptType, build_word_boundary_regex

RuleKind = Literal["literal_phrase", "regex_rule", "word_pair"]
Replacement = str | Callable[[re.Match[str]], str]


@functools.lru_cache(maxsize=4096)
def _compile(source: str, flags: int) -> re.Pattern[str]:
    return re.compile(source, flags)


@dataclasses.dataclass(frozen=True, slots=True)
class Rule:
    """A single rewrite.

    ``literal_phrase``: ``pattern`` is plain text, matched case-insensitively
    between word boundaries. ``word_pair``: like a literal phrase, but the
    match is left alone when it is part of a code identifier. ``regex_rule``:
    ``pattern`` is a regular expression and a string ``replacement`` may use
    group references (``\\1``).
    """

    kind: RuleKind
    pattern: str
    replacement: Replacement
    flags: int = re.IGNORECASE
    suffix: str = ""        # regex appended after a literal phrase, e.g. ",?\s*"
    match_case: bool = True

    def compile(self, script: ScriptType) -> re.Pattern[str]:
        if self.kind != "regex_rule":
            return build_word_boundary_regex(self.pattern, script, self.flags, self.suffix)
        flags = self.flags
        if script != "latin":
            flags |= re.UNICODE
        return _compile(self.pattern, flags)

    def expand(self, match: re.Match[str]) -> str:
        if callable(self.replacement):
            return self.replacement(match)
        if self.kind == "regex_rule":
            return match.expand(self.replacement)
        return self.replacement


def phrase(text: str, replacement: str, **kwargs) -> Rule:
    return Rule("literal_phrase", text.lower(), replacement, **kwargs)


def word(text: str, replacement: str) -> Rule:
    return Rule("word_pair", text.lower(), replacement)


def regex(pattern: str, replacement: Replacement, flags: int = re.IGNORECASE) -> Rule:
    return Rule("regex_rule", pattern, replacement, flags=flags)

"""Rule engine shared by every compression stage."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from tksq.dictionaries.rules import Rule
from tksq.language.boundary import ScriptType
from tksq.preserver import in_spans, placeholder_spans
from tksq.types import Change, StageOptions, StageResult

# (text, match) -> True to leave the match alone
Guard = Callable[[str, re.Match[str]], bool]


def match_case(original: str, replacement: str) -> str:
    """Re-apply the casing style of *original* to *replacement*.

    All-caps matches give an all-caps replacement, a capitalized match gives a
    capitalized replacement, anything else keeps the replacement as written.
    Single characters carry no style.
    """
    if not replacement or len(original) <= 1:
        return replacement
    if original.isupper():
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def is_part_of_identifier(text: str, start: int, end: int) -> bool:
    """Whether ``text[start:end]`` sits inside a code identifier.

    ``my_function``, ``obj.function``, ``function()`` and the ``Function`` in
    ``myFunction`` all count.
    """
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    if before and before in "_.":
        return True
    if after and after in "_(":
        return True
    if before.islower() and text[start:start + 1].isupper():
        return True
    last = text[end - 1:end]
    return last.islower() and after.isupper()


def _identifier_guard(text: str, match: re.Match[str]) -> bool:
    return is_part_of_identifier(text, match.start(), match.end())


def apply_rule(
    text: str,
    rule: Rule,
    script: ScriptType,
    tag: str,
    changes: list[Change],
    guard: Guard | None = None,
) -> str:
    """Apply one rule to *text*, appending a :class:`Change` per rewrite.

    Matches starting inside a placeholder, or rejected by *guard*, are kept
    as they are. ``word_pair`` rules are always guarded against identifiers.
    """
    pattern = rule.compile(script)
    spans = placeholder_spans(text)
    if guard is None and rule.kind == "word_pair":
        guard = _identifier_guard

    def _replace(match: re.Match[str]) -> str:
        original = match.group(0)
        if in_spans(match.start(), spans) or (guard is not None and guard(text, match)):
            return original
        replacement = rule.expand(match)
        if rule.match_case:
            replacement = match_case(original, replacement)
        if replacement != original:
            changes.append(Change(original, replacement, match.start(), tag))
        return replacement

    return pattern.sub(_replace, text)


def apply_rules(
    text: str,
    rules: Iterable[Rule],
    script: ScriptType,
    tag: str,
    changes: list[Change],
    guard: Guard | None = None,
) -> str:
    for rule in rules:
        text = apply_rule(text, rule, script, tag, changes, guard)
    return text


def longest_first(phrases: Iterable[str]) -> list[str]:
    """Longest phrase first, so no shorter phrase shadows a longer one."""
    return sorted(phrases, key=len, reverse=True)


class Stage:
    """A pure ``(text, options) -> StageResult`` transform."""

    id: str = ""
    name: str = ""

    def process(self, text: str, options: StageOptions) -> StageResult:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

"""Whitespace and punctuation normalization plus filler removal."""

from __future__ import annotations

import functools
import re

from tksq.dictionaries.rules import Rule, phrase
from tksq.stages.base import Stage, apply_rule, apply_rules, longest_first
from tksq.types import Change, StageOptions, StageResult


def _normalize(pattern: str, replacement: str, flags: int = 0) -> Rule:
    return Rule("regex_rule", pattern, replacement, flags=flags, match_case=False)


_BLANK_LINES = _normalize(r"\n{3,}", "\n\n")
# Runs after a non-space character only, so leading indentation survives.
_INTERIOR_SPACES = _normalize(r"(?<=\S) {2,}", " ")
_TRAILING_WHITESPACE = _normalize(r"[ \t]+$", "", re.MULTILINE)
_DOUBLE_PERIOD = _normalize(r"(?<!\.)\.\.(?!\.)", ".")
_SPACE_BEFORE_PUNCT = _normalize(r" +([.,;:!?])", r"\1")
_DOUBLE_COMMA = _normalize(r",(?:\s*,)+", ",")
_LEADING_COMMA = _normalize(r"^([ \t]*),[ \t]*", r"\1", re.MULTILINE)


@functools.lru_cache(maxsize=64)
def _filler_rules(fillers: tuple[str, ...]) -> tuple[Rule, ...]:
    # A trailing comma and the whitespace after it go with the filler.
    return tuple(phrase(f, "", suffix=r",?[ \t]*") for f in longest_first(fillers))


def _capitalize_rule(pattern: re.Pattern[str]) -> Rule:
    return Rule(
        "regex_rule",
        pattern.pattern,
        lambda m: m.group(0)[:-1] + m.group(1).upper(),
        flags=pattern.flags,
        match_case=False,
    )


class CleanupStage(Stage):
    id = "cleanup"
    name = "Cleanup"

    def process(self, text: str, options: StageOptions) -> StageResult:
        changes: list[Change] = []
        dictionary = options.dictionary
        script = dictionary.script

        text = apply_rule(text, _BLANK_LINES, script, "cleanup:blank-lines", changes)
        text = apply_rule(text, _INTERIOR_SPACES, script, "cleanup:collapse-spaces", changes)
        text = apply_rule(text, _TRAILING_WHITESPACE, script, "cleanup:trim-trailing", changes)

        if options.is_prose:
            text = apply_rules(text, _filler_rules(dictionary.fillers), script, "cleanup:filler", changes)
            text = apply_rules(text, dictionary.redundancies, script, "cleanup:redundancy", changes)

        text = apply_rule(text, _DOUBLE_PERIOD, script, "cleanup:double-period", changes)
        text = apply_rule(text, _SPACE_BEFORE_PUNCT, script, "cleanup:space-before-punct", changes)
        text = apply_rule(text, _DOUBLE_COMMA, script, "cleanup:double-comma", changes)
        if options.is_prose:
            text = apply_rule(
                text,
                _capitalize_rule(dictionary.capitalize_after_period),
                script,
                "cleanup:capitalize",
                changes,
            )
        text = apply_rule(text, _LEADING_COMMA, script, "cleanup:leading-comma", changes)

        # Removals above can leave fresh runs of spaces and blank lines.
        text = apply_rule(text, _INTERIOR_SPACES, script, "cleanup:collapse-spaces", changes)
        text = apply_rule(text, _TRAILING_WHITESPACE, script, "cleanup:trim-trailing", changes)
        text = apply_rule(text, _BLANK_LINES, script, "cleanup:blank-lines", changes)

        return StageResult(text.strip(), changes)

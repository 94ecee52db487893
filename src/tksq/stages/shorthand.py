"""Contractions, copula simplification, article removal and other shorthand."""

from __future__ import annotations

import re

from tksq.stages.base import Stage, apply_rule, apply_rules
from tksq.types import Change, StageOptions, StageResult

_SENTENCE_END = ".!?\n"


def at_sentence_start(text: str, start: int) -> bool:
    """True at text start, or after ``.``/``!``/``?``/newline and blanks."""
    head = text[:start].rstrip(" \t")
    return not head or head[-1] in _SENTENCE_END


def _sentence_start_guard(text: str, match: re.Match[str]) -> bool:
    return at_sentence_start(text, match.start())


class ShorthandStage(Stage):
    id = "shorthand"
    name = "Shorthand"

    def process(self, text: str, options: StageOptions) -> StageResult:
        changes: list[Change] = []
        if not options.is_prose:
            return StageResult(text, changes)

        script = options.dictionary.script
        rules = options.dictionary.shorthand

        if options.level == "aggressive":
            # Copulas match longer "it is ..." spans, so they go before contractions.
            text = apply_rules(text, rules.copulas, script, "shorthand:copula", changes)
            text = apply_rules(text, rules.deverbals, script, "shorthand:deverbal", changes)
            if rules.articles is not None:
                text = apply_rule(
                    text,
                    rules.articles,
                    script,
                    "shorthand:article",
                    changes,
                    guard=_sentence_start_guard,
                )
            text = apply_rules(
                text, rules.pronoun_elision, script, "shorthand:pronoun-elision", changes
            )
            if rules.patronymic is not None:
                text = apply_rule(text, rules.patronymic, script, "shorthand:patronymic", changes)

        if options.level != "light":
            text = apply_rules(text, rules.contractions, script, "shorthand:contraction", changes)

        return StageResult(text, changes)

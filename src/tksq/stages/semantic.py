"""Phrase substitution and word abbreviation."""

from __future__ import annotations

import functools
from collections.abc import Mapping

from tksq.dictionaries.rules import Rule, phrase, word
from tksq.stages.base import Stage, apply_rules, longest_first
from tksq.types import Change, StageOptions, StageResult


@functools.lru_cache(maxsize=64)
def _phrase_rules(items: tuple[tuple[str, str], ...]) -> tuple[Rule, ...]:
    mapping = dict(items)
    return tuple(phrase(key, mapping[key]) for key in longest_first(mapping))


@functools.lru_cache(maxsize=64)
def _word_rules(items: tuple[tuple[str, str], ...]) -> tuple[Rule, ...]:
    mapping = dict(items)
    return tuple(word(key, mapping[key]) for key in longest_first(mapping))


def _items(mapping: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    return tuple(mapping.items())


class SemanticStage(Stage):
    id = "semantic"
    name = "Semantic"

    def process(self, text: str, options: StageOptions) -> StageResult:
        changes: list[Change] = []
        if not options.is_prose:
            return StageResult(text, changes)

        dictionary = options.dictionary
        script = dictionary.script
        text = apply_rules(
            text,
            _phrase_rules(_items(dictionary.substitutions)),
            script,
            "semantic:substitution",
            changes,
        )
        if options.level != "light" and dictionary.abbreviations:
            text = apply_rules(
                text,
                _word_rules(_items(dictionary.abbreviations)),
                script,
                "semantic:abbreviation",
                changes,
            )
        return StageResult(text, changes)

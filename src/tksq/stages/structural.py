"""Line deduplication, repeated-word collapse and list condensing."""

from __future__ import annotations

import re

from tksq.dictionaries.rules import Rule
from tksq.preserver import PLACEHOLDER_RE
from tksq.stages.base import Stage, apply_rule
from tksq.types import Change, StageOptions, StageResult

# "very very very important" -> "very important"; words of 3+ letters only.
_REPEATED_WORD = Rule(
    "regex_rule",
    r"\b([^\W\d_]{3,})(?:\s+\1\b)+",
    r"\1",
    flags=re.IGNORECASE,
)

_MIN_LIST_ITEMS = 5


def _line_key(line: str) -> str:
    return " ".join(line.lower().split())


def dedupe_lines(text: str, changes: list[Change]) -> str:
    """Drop repeated lines, keeping the first occurrence as written.

    Lines compare case-insensitively with whitespace normalized. Blank lines
    and lines holding a preserved region are always kept.
    """
    seen: set[str] = set()
    kept: list[str] = []
    position = 0
    for line in text.split("\n"):
        key = _line_key(line)
        if not key or PLACEHOLDER_RE.search(line):
            kept.append(line)
        elif key in seen:
            changes.append(Change(line, "", position, "structural:dedup-sentence"))
        else:
            seen.add(key)
            kept.append(line)
        position += len(line) + 1
    return "\n".join(kept)


def condense_lists(text: str, changes: list[Change]) -> str:
    """Join a line of 5+ comma-separated items with semicolons."""
    lines = text.split("\n")
    position = 0
    for i, line in enumerate(lines):
        items = [item.strip() for item in line.split(",")]
        if len(items) >= _MIN_LIST_ITEMS and all(items):
            indent = line[: len(line) - len(line.lstrip())]
            condensed = indent + "; ".join(items)
            if condensed != line and len(condensed) <= len(line):
                changes.append(Change(line, condensed, position, "structural:condense-list"))
                lines[i] = condensed
        position += len(line) + 1
    return "\n".join(lines)


class StructuralStage(Stage):
    id = "structural"
    name = "Structural"

    def process(self, text: str, options: StageOptions) -> StageResult:
        changes: list[Change] = []
        if not options.is_prose:
            return StageResult(text, changes)

        if options.level != "light":
            text = dedupe_lines(text, changes)
        text = apply_rule(
            text,
            _REPEATED_WORD,
            options.dictionary.script,
            "structural:collapse-repeat",
            changes,
        )
        if options.level == "aggressive":
            text = condense_lists(text, changes)
        return StageResult(text, changes)

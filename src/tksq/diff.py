"""Word-level diff between an original and a compressed text."""

from __future__ import annotations

import dataclasses
import difflib
import re
from typing import Literal

SegmentKind = Literal["equal", "added", "removed"]

# Words and the whitespace between them, so joining tokens gives the text back.
_TOKEN_RE = re.compile(r"\s+|\S+")


@dataclasses.dataclass(frozen=True, slots=True)
class DiffSegment:
    kind: SegmentKind
    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class DiffResult:
    segments: tuple[DiffSegment, ...]
    formatted: str          # removals as [-text-], insertions as [+text+]
    added_count: int        # words in inserted segments
    removed_count: int      # words in removed segments


def _format(segment: DiffSegment) -> str:
    if segment.kind == "removed":
        return f"[-{segment.text}-]"
    if segment.kind == "added":
        return f"[+{segment.text}+]"
    return segment.text


class TextDiffer:
    @staticmethod
    def diff(original: str, compressed: str) -> DiffResult:
        """Compare two texts word by word.

        Args:
            original: Text before compression.
            compressed: Text after compression.

        Returns:
            The segments in order, a one-line rendering of them and the
            number of words added and removed.
        """
        before = _TOKEN_RE.findall(original)
        after = _TOKEN_RE.findall(compressed)
        matcher = difflib.SequenceMatcher(a=before, b=after, autojunk=False)

        segments: list[DiffSegment] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                segments.append(DiffSegment("equal", "".join(before[i1:i2])))
                continue
            if tag in ("delete", "replace"):
                segments.append(DiffSegment("removed", "".join(before[i1:i2])))
            if tag in ("insert", "replace"):
                segments.append(DiffSegment("added", "".join(after[j1:j2])))

        added = sum(len(s.text.split()) for s in segments if s.kind == "added")
        removed = sum(len(s.text.split()) for s in segments if s.kind == "removed")
        return DiffResult(
            segments=tuple(segments),
            formatted="".join(_format(s) for s in segments),
            added_count=added,
            removed_count=removed,
        )

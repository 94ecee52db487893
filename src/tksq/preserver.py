"""Protect code, URLs and long quotes from every compression stage."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from tksq.types import PreservedRegion

logger = logging.getLogger(__name__)

_BUILT_IN_PATTERNS = (
    re.compile(r"```.*?```", re.DOTALL),   # fenced code blocks
    re.compile(r"`[^`]+`"),                # inline code
    re.compile(r"https?://\S+"),           # URLs
    re.compile(r'"[^"]{80,}"'),            # long quotes, presumed intentional
)

PLACEHOLDER_RE = re.compile(r"\x00TKSQ\d*_\d+\x00")


def make_placeholder(index: int, nonce: str = "") -> str:
    return f"\x00TKSQ{nonce}_{index}\x00"


def _free_nonce(text: str) -> str:
    """First nonce whose placeholders cannot already occur in *text*."""
    nonce = ""
    while f"\x00TKSQ{nonce}_" in text:
        nonce = str(int(nonce or 0) + 1)
    return nonce


def placeholder_spans(text: str) -> list[tuple[int, int]]:
    """(start, end) of every placeholder currently in *text*."""
    if "\x00" not in text:
        return []
    return [(m.start(), m.end()) for m in PLACEHOLDER_RE.finditer(text)]


def in_spans(position: int, spans: list[tuple[int, int]]) -> bool:
    return any(start <= position < end for start, end in spans)


def compile_user_patterns(patterns: Iterable[str | re.Pattern[str]] | None) -> list[re.Pattern[str]]:
    """Compile caller patterns, silently dropping the ones that do not compile."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns or ():
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            logger.debug("Skipping invalid preserve pattern %r: %s", pattern, e)
    return compiled


def _remove_overlaps(matches: list[tuple[int, int, str]]) -> list[tuple[int, int, str]]:
    """Greedy longest-first: keep a match only if it overlaps nothing kept."""
    kept: list[tuple[int, int, str]] = []
    for match in sorted(matches, key=lambda m: m[1] - m[0], reverse=True):
        start, end, _ = match
        if any(start < k_end and end > k_start for k_start, k_end, _ in kept):
            continue
        kept.append(match)
    return kept


class PatternPreserver:
    """Swap protected spans for opaque placeholders and back."""

    def extract(
        self,
        text: str,
        user_patterns: Iterable[str | re.Pattern[str]] | None = None,
    ) -> tuple[str, list[PreservedRegion]]:
        matches: list[tuple[int, int, str]] = []
        for pattern in (*_BUILT_IN_PATTERNS, *compile_user_patterns(user_patterns)):
            try:
                found = [(m.start(), m.end(), m.group(0)) for m in pattern.finditer(text)]
            except (re.error, TypeError, RecursionError) as e:
                logger.debug("Skipping preserve pattern %r: %s", pattern.pattern, e)
                continue
            # Empty matches protect nothing and would only add placeholders.
            matches.extend(m for m in found if m[1] > m[0])

        kept = _remove_overlaps(matches)
        # Back to front so earlier offsets stay valid while replacing.
        kept.sort(key=lambda m: m[0], reverse=True)

        # Input that already holds a placeholder-shaped literal gets a
        # different marker, so restore() never hits the literal.
        nonce = _free_nonce(text)
        regions: list[PreservedRegion] = []
        processed = text
        for index, (start, end, original) in enumerate(kept):
            placeholder = make_placeholder(index, nonce)
            regions.append(PreservedRegion(start, end, placeholder, original))
            processed = processed[:start] + placeholder + processed[end:]

        return processed, regions

    def restore(self, text: str, regions: Iterable[PreservedRegion]) -> str:
        for region in regions:
            text = text.replace(region.placeholder, region.original_text, 1)
        return text

"""Word-boundary anchored patterns that behave the same for every script."""

from __future__ import annotations

import functools
import re
from typing import Literal

ScriptType = Literal["latin", "cyrillic"]

# ``[^\W\d_]`` is "any Unicode letter" for str patterns.
NO_LETTER_BEFORE = r"(?<![^\W\d_])"
NO_LETTER_AFTER = r"(?![^\W\d_])"


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def build_boundary_pattern(escaped: str, script: ScriptType) -> str:
    """Wrap an already-escaped phrase in boundary anchors for *script*.

    Latin text uses ``\\b``. An edge that is punctuation (``e.g.``) cannot
    sit on a ``\\b``, so it gets a no-word-character lookaround instead.
    Other scripts use letter lookarounds, so digits and underscores count as
    separators there, the same as punctuation.
    """
    if script != "latin":
        return f"{NO_LETTER_BEFORE}{escaped}{NO_LETTER_AFTER}"
    # re.escape() backslash-prefixes punctuation but never the final character.
    head = r"\b" if _is_word_char(escaped[:1]) else r"(?<!\w)"
    tail = r"\b" if _is_word_char(escaped[-1:]) else r"(?!\w)"
    return f"{head}{escaped}{tail}"


@functools.lru_cache(maxsize=4096)
def build_word_boundary_regex(
    phrase: str,
    script: ScriptType,
    flags: int = re.IGNORECASE,
    suffix: str = "",
) -> re.Pattern[str]:
    """Compile *phrase* as a literal, boundary-anchored pattern.

    *suffix* is raw regex appended after the closing anchor.
    """
    pattern = build_boundary_pattern(re.escape(phrase), script) + suffix
    if script != "latin":
        flags |= re.UNICODE
    return re.compile(pattern, flags)

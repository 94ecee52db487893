"""Token counting backends."""

from __future__ import annotations

import logging
import math
from typing import Protocol

import tiktoken

from tksq.types import TOKENIZERS

logger = logging.getLogger(__name__)


class TokenCounter(Protocol):
    name: str

    def count(self, text: str) -> int: ...


def approximate_count(text: str) -> int:
    """Roughly four characters per token."""
    if not text:
        return 0
    return max(1, math.ceil(len(text) / 4))


class ApproximateCounter:
    name = "approximate"

    def count(self, text: str) -> int:
        return approximate_count(text)


class TiktokenCounter:
    """Exact counts from a tiktoken encoding, loaded on first use.

    Until :meth:`ensure_ready` succeeds, or after it has failed (the encoding
    files are fetched over the network the first time), counts fall back to
    :func:`approximate_count`.
    """

    def __init__(self, encoding_name: str) -> None:
        self.name = encoding_name
        self._encoding: tiktoken.Encoding | None = None
        self._failed = False

    def ensure_ready(self) -> bool:
        if self._encoding is None and not self._failed:
            try:
                self._encoding = tiktoken.get_encoding(self.name)
            except Exception as e:  # tiktoken surfaces network and cache errors as-is
                self._failed = True
                logger.warning(
                    "Could not load tiktoken encoding %s, using approximate counts: %s",
                    self.name,
                    e,
                )
        return self._encoding is not None

    def count(self, text: str) -> int:
        if not text:
            return 0
        if self._encoding is None:
            return approximate_count(text)
        return len(self._encoding.encode(text, disallowed_special=()))


class TokenCounterFactory:
    _counters: dict[str, TokenCounter] = {}

    @classmethod
    def create(cls, tokenizer: str = "cl100k_base") -> TokenCounter:
        """Return the shared counter for *tokenizer*, without loading it.

        Raises:
            ValueError: If *tokenizer* is not a known tokenizer.
        """
        if tokenizer not in TOKENIZERS:
            raise ValueError(
                f"Unknown tokenizer: {tokenizer}. Available: {', '.join(TOKENIZERS)}"
            )
        counter = cls._counters.get(tokenizer)
        if counter is None:
            if tokenizer == "approximate":
                counter = ApproximateCounter()
            else:
                counter = TiktokenCounter(tokenizer)
            cls._counters[tokenizer] = counter
        return counter

    @classmethod
    def create_ready(cls, tokenizer: str = "cl100k_base") -> TokenCounter:
        """Like :meth:`create`, but load the encoding first."""
        counter = cls.create(tokenizer)
        if isinstance(counter, TiktokenCounter):
            counter.ensure_ready()
        return counter

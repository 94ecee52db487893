"""Build the per-request substitution dictionary."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from tksq.dictionaries.domains import DOMAIN_OVERLAYS
from tksq.dictionaries.languages import LanguageRegistry, ShorthandRules
from tksq.dictionaries.rules import Rule
from tksq.language.boundary import ScriptType


@dataclasses.dataclass(frozen=True, slots=True)
class SubstitutionDictionary:
    """Rules for one (domain, language, overrides) combination.

    Phrase keys are lower-cased so matching is case-insensitive; values keep
    their casing and are case-adjusted at substitution time.
    """

    language: str
    script: ScriptType
    fillers: tuple[str, ...]
    substitutions: Mapping[str, str]
    redundancies: tuple[Rule, ...]
    abbreviations: Mapping[str, str]
    shorthand: ShorthandRules
    capitalize_after_period: re.Pattern[str]


def merge_layers(*layers: Iterable[tuple[str, str]] | Mapping[str, str] | None) -> Mapping[str, str]:
    """Merge phrase maps in order; later layers win. Keys are lower-cased."""
    merged: dict[str, str] = {}
    for layer in layers:
        if not layer:
            continue
        items = layer.items() if isinstance(layer, Mapping) else layer
        for key, value in items:
            merged[key.lower()] = value
    return MappingProxyType(merged)


class DictionaryLoader:
    @staticmethod
    def load(
        domain: str = "general",
        language: str = "en",
        overrides: Mapping[str, str] | None = None,
    ) -> SubstitutionDictionary:
        """Compose language pack, domain overlay, then caller overrides.

        Raises:
            ValueError: If *domain* or *language* is unknown.
        """
        overlay = DOMAIN_OVERLAYS.get(domain)
        if overlay is None:
            available = ", ".join(DOMAIN_OVERLAYS)
            raise ValueError(f"Unknown domain: {domain}. Available: {available}")
        pack = LanguageRegistry.get(language)
        domain_substitutions, domain_abbreviations = overlay

        return SubstitutionDictionary(
            language=pack.code,
            script=pack.script,
            fillers=tuple(f.lower() for f in pack.fillers),
            substitutions=merge_layers(pack.substitutions, domain_substitutions, overrides),
            redundancies=pack.redundancies,
            abbreviations=merge_layers(domain_abbreviations),
            shorthand=pack.shorthand,
            capitalize_after_period=pack.capitalize_after_period,
        )

    @staticmethod
    def available_domains() -> list[str]:
        return list(DOMAIN_OVERLAYS)

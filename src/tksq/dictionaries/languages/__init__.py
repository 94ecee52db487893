"""Language packs and their registry."""

from __future__ import annotations

from tksq.dictionaries.languages.base import LanguagePack, ShorthandRules
from tksq.dictionaries.languages.en import ENGLISH
from tksq.dictionaries.languages.ru import RUSSIAN

_LANGUAGE_PACKS: dict[str, LanguagePack] = {
    ENGLISH.code: ENGLISH,
    RUSSIAN.code: RUSSIAN,
}


class LanguageRegistry:
    @staticmethod
    def get(code: str) -> LanguagePack:
        pack = _LANGUAGE_PACKS.get(code)
        if pack is None:
            available = ", ".join(_LANGUAGE_PACKS)
            raise ValueError(f"Unknown language: {code}. Available: {available}")
        return pack

    @staticmethod
    def available_languages() -> list[str]:
        return list(_LANGUAGE_PACKS)


__all__ = ["LanguagePack", "LanguageRegistry", "ShorthandRules"]

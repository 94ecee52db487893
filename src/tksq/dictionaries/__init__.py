"""Rule dictionaries: language packs, domain overlays and the loader."""

from tksq.dictionaries.languages import LanguagePack, LanguageRegistry, ShorthandRules
from tksq.dictionaries.loader import DictionaryLoader, SubstitutionDictionary, merge_layers
from tksq.dictionaries.rules import Rule

__all__ = [
    "DictionaryLoader",
    "LanguagePack",
    "LanguageRegistry",
    "Rule",
    "ShorthandRules",
    "SubstitutionDictionary",
    "merge_layers",
]

"""tksq - Reduce the token count of text sent to language models."""

from tksq.config import ConfigManager, LearningConfig, TksqConfig
from tksq.diff import DiffResult, TextDiffer
from tksq.dictionaries import DictionaryLoader, LanguageRegistry, SubstitutionDictionary
from tksq.language import LanguageDetector
from tksq.learning import PhraseStore, PhraseTracker
from tksq.pipeline import available_stages, compress, stages_for_level
from tksq.preserver import PatternPreserver
from tksq.service import CompressionService
from tksq.tokenizer import TokenCounterFactory
from tksq.types import (
    Change,
    CompressionStats,
    PipelineConfig,
    PipelineResult,
    PreservedRegion,
    StageStats,
)

__version__ = "0.1.0"

__all__ = [
    "compress",
    "available_stages",
    "stages_for_level",
    "Change",
    "CompressionService",
    "CompressionStats",
    "ConfigManager",
    "DictionaryLoader",
    "DiffResult",
    "LanguageDetector",
    "LanguageRegistry",
    "LearningConfig",
    "PatternPreserver",
    "PhraseStore",
    "PhraseTracker",
    "PipelineConfig",
    "PipelineResult",
    "PreservedRegion",
    "StageStats",
    "SubstitutionDictionary",
    "TextDiffer",
    "TksqConfig",
    "TokenCounterFactory",
]

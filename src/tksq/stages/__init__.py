"""Compression stages, in the order the pipeline runs them."""

from tksq.stages.base import Stage, apply_rule, apply_rules, is_part_of_identifier, match_case
from tksq.stages.cleanup import CleanupStage
from tksq.stages.semantic import SemanticStage
from tksq.stages.shorthand import ShorthandStage
from tksq.stages.structural import StructuralStage

__all__ = [
    "CleanupStage",
    "SemanticStage",
    "ShorthandStage",
    "Stage",
    "StructuralStage",
    "apply_rule",
    "apply_rules",
    "is_part_of_identifier",
    "match_case",
]

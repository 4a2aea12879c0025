"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .filter_rules import BinaryExclusionRules, ExtensionExclusionRules, HiddenExclusionRules
from .line_count_rules import LineCountExclusionRules
from .pattern_rules import PatternExclusionRules, path_matches_pattern

__all__ = [
    "BaseExclusionRules",
    "BinaryExclusionRules",
    "CompositeExclusionRules",
    "ExtensionExclusionRules",
    "HiddenExclusionRules",
    "LineCountExclusionRules",
    "PatternExclusionRules",
    "path_matches_pattern",
]

"""Exclusion rules for filtering files and directories by name."""

from .base_rules import BaseExclusionRules
from .ignore_pattern_rules import IgnorePatternRules

__all__ = [
    "BaseExclusionRules",
    "IgnorePatternRules",
]

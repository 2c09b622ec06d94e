"""Substring-based exclusion rules with the hidden-file convention."""

from typing import Iterable, List, Optional

from .base_rules import BaseExclusionRules


class IgnorePatternRules(BaseExclusionRules):
    """Excludes names containing any configured pattern, and hidden names.

    A pattern matches when it occurs anywhere in the entry's base name. Patterns are
    plain, case-sensitive substrings: no globbing and no anchoring, so ``build``
    also excludes ``prebuild.sh``. Names starting with ``.`` are excluded as well
    unless ignore_hidden is False.

    Empty patterns are dropped because an empty substring matches every name.

    Attributes:
        patterns (List[str]): Patterns in the order they were added.
        ignore_hidden (bool): Whether names starting with "." are excluded.

    Example:
        >>> rules = IgnorePatternRules(["node_modules", "build"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("prebuild.sh")
        True
        >>> rules.exclude(".env")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule(".py")
        >>> rules.exclude("main.py")
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, ignore_hidden: bool = True) -> None:
        self.patterns: List[str] = []
        self.ignore_hidden = ignore_hidden
        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, name: str) -> bool:
        if self.ignore_hidden and name.startswith("."):
            return True
        return any(pattern in name for pattern in self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add a substring pattern. Empty strings are ignored."""
        if rule:
            self.patterns.append(rule)

    def __repr__(self) -> str:
        return f"IgnorePatternRules(patterns={self.patterns!r}, ignore_hidden={self.ignore_hidden})"

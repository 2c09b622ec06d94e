from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree builder consults an exclusion rules object once per directory entry,
    before the entry is sized or visited, so an excluded directory is never listed.
    Implementations decide from the entry's base name alone.

    Example:
        >>> class ExtensionRules(BaseExclusionRules):
        ...     def __init__(self, extension: str):
        ...         self.extension = extension
        ...     def exclude(self, name: str) -> bool:
        ...         return name.endswith(self.extension)
        >>> rules = ExtensionRules(".pyc")
        >>> rules.exclude("module.pyc")
        True
        >>> rules.exclude("module.py")
        False
        >>> # rules.add_rule(".log")  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            name (str): Base name of the file or directory (no path separators).

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Rule types that are fixed at construction use this default implementation,
        which raises NotImplementedError.

        Args:
            rule (str): The rule to add. Its format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirr.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Implementations decide whether an entry met during traversal is left out of the
    tree. Paths are given relative to the traversal root, use forward slashes, and
    carry a trailing slash when the entry is a directory (``"src/build/"``), so
    that directory-only rules can tell directories from files. File loading and
    individual rule addition are optional capabilities that depend on the rule type.

    Example:
        >>> from dirr.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules"])
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("web/node_modules")  # a file with that name
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the traversal root, with a trailing ``/``
                for directories.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True

"""Exclusion of directories by exact base name."""

from typing import Iterable, Set

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclusion set of plain directory names.

    A directory is excluded when its base name is exactly one of the configured
    names, at any depth. Matching is case-sensitive string equality with no
    wildcard or path semantics, and only directories are affected: a regular file
    that happens to share an excluded name is kept.

    Attributes:
        names (Set[str]): The excluded directory names.

    Example:
        >>> rules = NameExclusionRules(["build", ".git"])
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/build/")
        True
        >>> rules.exclude("Build/")
        False
        >>> rules.exclude("build")
        False
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.names: Set[str] = set(names)

    def exclude(self, path: str) -> bool:
        if not path.endswith("/"):
            return False
        return path.rstrip("/").rsplit("/", 1)[-1] in self.names

    def add_rule(self, rule: str) -> None:
        """Add one directory name to the exclusion set."""
        self.names.add(rule)

    def has_rules(self) -> bool:
        return bool(self.names)

"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dirr.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them,
    so globs, directory-only patterns (``build/``), negations (``!keep.log``),
    ``**`` and comment lines all behave as they do in a .gitignore file. Unlike
    name exclusions, patterns apply to files as well as directories.

    Patterns can be loaded from files or added one at a time; they are kept in the
    order they were given, so later negations override earlier matches.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
        >>> rules.add_rule("dist/")
        >>> rules.exclude("dist/")
        True
        >>> rules.exclude("dist")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns from one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern (e.g. ``"*.pyc"`` or ``"!keep.txt"``)."""
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        # Blank and comment lines compile to patterns with include=None
        return any(pattern.include is not None for pattern in self.spec.patterns)

"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from fileutils.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore pattern syntax.

    Patterns are matched with the pathspec library in the same way Git matches them,
    including globs, directory-only patterns ending in ``/``, negation with ``!``,
    ``**`` and comment lines. Rules can come from files, from an iterable of pattern
    lines, or be added one at a time; later rules override earlier ones.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher for all rules added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules(patterns=["*.pyc", "build/"])
        >>> rules.exclude("pkg/module.pyc")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.add_rule("!keep.pyc")
        >>> rules.exclude("keep.pyc")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        patterns: Optional[Iterable[str]] = None,
    ):
        """Initialize GitIgnoreExclusionRules.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            patterns: Pattern lines to add after the files' patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)
        if patterns is not None:
            self._extend(patterns)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

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
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. "*.pyc" or "!important.txt"."""
        self._extend([rule])

    def _extend(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

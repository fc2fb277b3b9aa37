from abc import ABC, abstractmethod
from typing import Sequence, Union

from fileutils.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    The tree walker consults an exclusion rules object for every path below a root.
    A path for which ``exclude`` returns True is not yielded, and if it is a directory
    nothing below it is visited either. Implementations decide how rules are expressed;
    loading rules from files and adding individual rules are optional capabilities.

    Example:
        >>> class ExtensionExclusionRules(BaseExclusionRules):
        ...     def __init__(self, extension: str):
        ...         self.extension = extension
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(self.extension)
        >>> rules = ExtensionExclusionRules(".tmp")
        >>> rules.exclude("build/temp.tmp")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule("*.log")
        Traceback (most recent call last):
        ...
        NotImplementedError: ExtensionExclusionRules doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a path should be excluded from a walk.

        Args:
            path (str): Path relative to the root being walked, using forward slashes.
                Directories are checked both without and with a trailing slash.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

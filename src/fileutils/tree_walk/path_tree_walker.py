"""Lazy depth-first walker over one or more directory trees."""

import logging
import os
from typing import FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from fileutils.exclusion_rules.base_rules import BaseExclusionRules
from fileutils.path_info import PathMetadata, lstat, parse_time_format, stat
from fileutils.results import INVALID_OPTION, Failure, Success
from fileutils.tree_walk.file_identifier import FileIdentifier
from fileutils.types import FileType, PathType, TimeFormat

logger = logging.getLogger(__name__)


class _Visit(NamedTuple):
    path: str
    root: str
    ancestors: FrozenSet[FileIdentifier]


class _Expand(NamedTuple):
    path: str
    root: str
    ancestors: FrozenSet[FileIdentifier]


class PathTreeWalker:
    """Iterator yielding ``(path, PathMetadata)`` pairs for one or more directory trees.

    Trees are walked depth first and in pre-order: a directory is yielded before its
    contents, and the names inside each directory are visited in sorted order. Roots
    are sorted too, and each root's tree is finished before the next root starts.

    The walk is driven by a stack of pending work. Yielding a directory only pushes a
    marker for it; the directory is listed when the consumer asks for the next item.
    Taking the first few items therefore touches only the part of the tree needed to
    produce them. No file handles are held between items, so a walker can be abandoned
    at any point.

    Nodes that cannot be inspected (deleted during the walk, dangling symlinks when
    links are followed, ...) are skipped silently. A directory that cannot be listed is
    yielded with no contents.

    Attributes:
        symlink_stat (bool): Report symlinks themselves instead of their targets. Symlinks
            to directories are still descended into.
        time_format (TimeFormat): Representation of the metadata timestamps.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for pruning paths, matched
            against the path relative to its root with forward slashes.

    Example:
        >>> walker = PathTreeWalker(["/tmp/tree"])  # doctest: +SKIP
        >>> [path for path, _ in walker]  # doctest: +SKIP
        ['/tmp/tree', '/tmp/tree/fox', '/tmp/tree/fox/brown', '/tmp/tree/jumps']
    """

    def __init__(
        self,
        root_dirs: Iterable[PathType],
        symlink_stat: bool = False,
        time_format: TimeFormat = TimeFormat.LOCAL,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.symlink_stat = symlink_stat
        self.time_format = time_format
        self.exclusion_rules = exclusion_rules

        roots = sorted(os.fspath(root) for root in root_dirs)
        self._stack: List[Union[_Visit, _Expand]] = [_Visit(root, root, frozenset()) for root in reversed(roots)]

    def __iter__(self) -> Iterator[Tuple[str, PathMetadata]]:
        """Return self as iterator."""
        return self

    def __next__(self) -> Tuple[str, PathMetadata]:
        """Get the next path and its metadata.

        Returns:
            A ``(path, metadata)`` pair.

        Raises:
            StopIteration: When every tree has been walked.
        """
        while self._stack:
            item = self._stack.pop()
            if isinstance(item, _Expand):
                self._stack.extend(reversed(self._list_children(item)))
                continue

            metadata = self._inspect(item.path)
            if metadata is None or self._is_excluded(item, metadata):
                continue

            identifier = self._directory_identifier(item.path, metadata)
            if identifier is not None:
                if identifier in item.ancestors:
                    logger.debug("Not descending into %s: directory loop detected", item.path)
                else:
                    self._stack.append(_Expand(item.path, item.root, item.ancestors | {identifier}))
            return item.path, metadata

        raise StopIteration

    def _inspect(self, path: str) -> Optional[PathMetadata]:
        query = lstat if self.symlink_stat else stat
        result = query(path, time=self.time_format)
        if isinstance(result, Failure):
            logger.debug("Skipping %s: %s", path, result.reason)
            return None
        return result.value

    def _directory_identifier(self, path: str, metadata: PathMetadata) -> Optional[FileIdentifier]:
        """Return the identity of the directory to expand at ``path``, or None for non-directories.

        Symlinks reported with their own metadata are still descended into when they
        point to a directory, using the identity of the target.
        """
        if metadata.type is FileType.SYMLINK:
            result = stat(path, time=self.time_format)
            if isinstance(result, Failure):
                return None
            metadata = result.value
        if not metadata.is_dir:
            return None
        return FileIdentifier.from_metadata(metadata)

    def _is_excluded(self, item: _Visit, metadata: PathMetadata) -> bool:
        if self.exclusion_rules is None or item.path == item.root:
            return False

        relative_path = os.path.relpath(item.path, item.root).replace(os.sep, "/")
        if self.exclusion_rules.exclude(relative_path):
            return True
        # Directory-only patterns such as "build/" need the trailing slash to match
        return metadata.is_dir and self.exclusion_rules.exclude(relative_path + "/")

    def _list_children(self, item: _Expand) -> List[_Visit]:
        try:
            names = sorted(os.listdir(item.path))
        except OSError as e:
            logger.debug("Cannot list %s: %s", item.path, e)
            return []
        return [_Visit(os.path.join(item.path, name), item.root, item.ancestors) for name in names]


def path_tree_walk(
    root_dirs: Union[PathType, Iterable[PathType]],
    symlink_stat: bool = False,
    time: Union[str, TimeFormat] = TimeFormat.LOCAL,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> Union[Success[PathTreeWalker], Failure]:
    """Return a walker over one or more directory trees.

    Options are validated before anything is walked; an invalid option yields a
    failure and no walker.

    Args:
        root_dirs: A single root path or a collection of root paths.
        symlink_stat: If True, symbolic links are reported with their own metadata
            instead of the metadata of the file they refer to. Defaults to False.
        time: Representation of the metadata timestamps: "local" (default),
            "universal" or "posix".
        exclusion_rules: Optional rules; matching paths are skipped together with
            everything below them.

    Returns:
        ``Success(PathTreeWalker)``, or ``Failure(INVALID_OPTION, (option, value))``.

    Example:
        >>> result = path_tree_walk("/tmp/tree", time="posix")  # doctest: +SKIP
        >>> for path, metadata in result.value:  # doctest: +SKIP
        ...     print(path, metadata.type.value)
        /tmp/tree directory
        /tmp/tree/fox directory
        /tmp/tree/fox/brown regular
    """
    if not isinstance(symlink_stat, bool):
        return Failure(INVALID_OPTION, ("symlink_stat", symlink_stat))
    try:
        time_format = parse_time_format(time)
    except ValueError:
        return Failure(INVALID_OPTION, ("time", time))
    if exclusion_rules is not None and not isinstance(exclusion_rules, BaseExclusionRules):
        return Failure(INVALID_OPTION, ("exclusion_rules", exclusion_rules))

    if isinstance(root_dirs, (str, os.PathLike)):
        root_dirs = [root_dirs]
    return Success(PathTreeWalker(root_dirs, symlink_stat, time_format, exclusion_rules))

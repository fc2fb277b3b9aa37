"""Installation of declarative file trees onto the filesystem.

``install_file_tree`` creates a tree of ``FileEntry`` / ``DirectoryEntry`` nodes below
a root directory, stopping at the first failure. Nothing is rolled back: entries
created before the failure stay on disk.
"""

import logging
import os
from typing import Any, Iterable, Optional, Union

from fileutils.file_tree.entry import FileEntry, is_well_formed
from fileutils.results import MALFORMED_ENTRY, Failure, Success
from fileutils.types import PathType

logger = logging.getLogger(__name__)


def install_file_tree(root_dir: PathType, entries: Iterable[Any]) -> Union[Success[None], Failure]:
    """Create a tree of files and directories under ``root_dir``.

    The root directory is created first if needed, including missing parents. Each
    entry is then installed in order: files are created exclusively, written and given
    their permission; directories are created, populated recursively, and only then
    given their permission, so a read-only directory can still receive its children.

    Args:
        root_dir: Directory under which the entries are created. Can be any path-like object.
        entries: FileEntry and DirectoryEntry objects, in creation order.

    Returns:
        ``Success()`` when everything was installed. Otherwise the first failure:

        - ``Failure(<errno name>, "")`` if the root directory cannot be created;
        - ``Failure(<errno name>, <path relative to root_dir>)`` if creating or
          changing the permission of an entry fails;
        - ``Failure(MALFORMED_ENTRY, <entry>)`` for a value that is not a valid entry.
          The offending value itself is returned, not a path.

    Raises:
        TypeError: If ``entries`` is a string or not iterable.

    Example:
        >>> install_file_tree(tmp, [  # doctest: +SKIP
        ...     DirectoryEntry("test-data", children=[
        ...         FileEntry("data", b"\\x00\\x01\\x02\\x03\\x04"),
        ...         FileEntry("read_only", b"\\x04\\x03\\x02\\x01\\x00", permission=0o444),
        ...         DirectoryEntry("subdir", permission=0o555, children=[
        ...             FileEntry("more_data", "The quick brown fox..."),
        ...         ]),
        ...     ]),
        ... ])
        Success(value=None)
    """
    if isinstance(entries, (str, bytes)):
        raise TypeError("entries must be an iterable of FileEntry/DirectoryEntry objects, not a string")
    entries = list(entries)

    root = os.fspath(root_dir)
    try:
        os.makedirs(root, exist_ok=True)
    except OSError as e:
        logger.debug("Could not create root directory %s: %s", root, e)
        return Failure.from_os_error(e, "")

    failure = _install_entries(root, entries)
    if failure is None:
        return Success()
    if failure.reason == MALFORMED_ENTRY:
        return failure
    return Failure(failure.reason, os.path.relpath(failure.detail, root), error=failure.error)


def _install_entries(workdir: str, entries: Iterable[Any]) -> Optional[Failure]:
    for entry in entries:
        failure = _install_entry(workdir, entry)
        if failure is not None:
            return failure
    return None


def _install_entry(workdir: str, entry: Any) -> Optional[Failure]:
    if not is_well_formed(entry):
        logger.debug("Malformed entry in %s: %r", workdir, entry)
        return Failure(MALFORMED_ENTRY, entry)

    pathname = os.path.join(workdir, entry.name)
    try:
        if isinstance(entry, FileEntry):
            with open(pathname, "xb") as f:
                f.write(entry.data)
            os.chmod(pathname, entry.effective_permission)
            return None

        os.mkdir(pathname)
        failure = _install_entries(pathname, entry.children)
        if failure is not None:
            return failure
        os.chmod(pathname, entry.effective_permission)
    except OSError as e:
        logger.debug("Could not install %s: %s", pathname, e)
        return Failure.from_os_error(e, pathname)
    return None

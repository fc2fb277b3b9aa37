"""Entry classes describing files and directories to be installed."""

import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

DEFAULT_FILE_PERMISSION = 0o644
DEFAULT_DIRECTORY_PERMISSION = 0o755
MAX_PERMISSION = 0o777


@dataclass(frozen=True)
class FileEntry:
    """A regular file to be created with the given content.

    Attributes:
        name (str): Name of the file (a single path segment).
        content (Union[bytes, str]): Bytes written to the file. A str is written
            encoded as UTF-8.
        permission (Optional[int]): Permission bits in [0, 0o777], or None for 0o644.

    Example:
        >>> entry = FileEntry("data", b"\\x00\\x01")
        >>> entry.effective_permission == 0o644
        True
        >>> FileEntry("read_only", "article", permission=0o444).data
        b'article'
    """

    name: str
    content: Union[bytes, str] = b""
    permission: Optional[int] = None

    @property
    def effective_permission(self) -> int:
        return DEFAULT_FILE_PERMISSION if self.permission is None else self.permission

    @property
    def data(self) -> bytes:
        """The file content as bytes."""
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return bytes(self.content)


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory to be created, populated with its children, then given its permission.

    Attributes:
        name (str): Name of the directory (a single path segment).
        permission (Optional[int]): Permission bits in [0, 0o777], or None for 0o755.
            Applied after the children are installed.
        children (Sequence[Entry]): Entries to create inside the directory, in order.

    Example:
        >>> over = DirectoryEntry("over", children=[DirectoryEntry("dog", children=[FileEntry("lazy")])])
        >>> over.effective_permission == 0o755
        True
        >>> [child.name for child in over.children]
        ['dog']
    """

    name: str
    permission: Optional[int] = None
    children: Sequence["Entry"] = ()

    def __post_init__(self) -> None:
        # Children are stored as a tuple so entries stay hashable. Strings are kept as given
        # and rejected by is_well_formed.
        if not isinstance(self.children, (tuple, str, bytes)):
            object.__setattr__(self, "children", tuple(self.children or ()))

    @property
    def effective_permission(self) -> int:
        return DEFAULT_DIRECTORY_PERMISSION if self.permission is None else self.permission


Entry = Union[FileEntry, DirectoryEntry]


def is_valid_name(name: Any) -> bool:
    """Check that ``name`` is a usable single path segment.

    Example:
        >>> is_valid_name("fox"), is_valid_name(""), is_valid_name("a/b"), is_valid_name("..")
        (True, False, False, False)
    """
    if not isinstance(name, str) or name in ("", ".", ".."):
        return False
    if "\0" in name or os.sep in name:
        return False
    return not (os.altsep and os.altsep in name)


def is_valid_permission(permission: Any) -> bool:
    """Check that ``permission`` is None or an int in [0, 0o777].

    Example:
        >>> is_valid_permission(None), is_valid_permission(0o755), is_valid_permission(0o1000), is_valid_permission(-1)
        (True, True, False, False)
    """
    if permission is None:
        return True
    if isinstance(permission, bool) or not isinstance(permission, int):
        return False
    return 0 <= permission <= MAX_PERMISSION


def is_well_formed(entry: Any) -> bool:
    """Check that a value is an entry whose own fields are valid.

    Children are not checked; the installer checks each one when it reaches it, after
    the earlier siblings have been created.
    """
    if not isinstance(entry, (FileEntry, DirectoryEntry)):
        return False
    if not is_valid_name(entry.name) or not is_valid_permission(entry.permission):
        return False
    if isinstance(entry, FileEntry):
        return isinstance(entry.content, (bytes, bytearray, str))
    return not isinstance(entry.children, (str, bytes))

"""Device and inode identity of directories, used by the walker for loop detection."""

from typing import NamedTuple

from fileutils.path_info import PathMetadata


class FileIdentifier(NamedTuple):
    """Identity of a filesystem node: the device holding it and its inode number.

    The tree walker records the identifiers of the directories above the one it is
    expanding. A directory whose identifier is already among its ancestors was reached
    through a symbolic link loop and is not expanded again.

    Example:
        >>> FileIdentifier(123, 456) == FileIdentifier(device=123, inode=456)
        True
    """

    device: int
    inode: int

    @classmethod
    def from_metadata(cls, metadata: PathMetadata) -> "FileIdentifier":
        return cls(metadata.major_device, metadata.inode)

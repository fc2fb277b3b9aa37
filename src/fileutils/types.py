from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(str, Enum):
    """Enumeration of the kinds of filesystem node reported in path metadata.

    Attributes:
        REGULAR: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (only reported by link-aware inspection)
        DEVICE: Character or block device
        OTHER: Anything else (FIFO, socket, ...)
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    DEVICE = "device"
    OTHER = "other"


class TimeFormat(str, Enum):
    """Representation used for the timestamps of path metadata.

    Values:
        LOCAL: Naive datetime in local wall-clock time (default)
        UNIVERSAL: Timezone-aware datetime in UTC
        POSIX: Integer seconds since the epoch
    """

    LOCAL = "local"
    UNIVERSAL = "universal"
    POSIX = "posix"

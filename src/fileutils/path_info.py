"""Path inspection returning metadata records.

This module wraps ``os.stat`` and ``os.lstat`` so that results come back as
``PathMetadata`` records inside ``Success``/``Failure`` values, with timestamps in a
caller-selected representation. ``lstat`` reports on a symbolic link itself instead of
the file it refers to.
"""

import math
import os
import stat as stat_module
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Union

from fileutils.exceptions import FileOperationError
from fileutils.results import INVALID_OPTION, Failure, Result, Success
from fileutils.types import FileType, PathType, TimeFormat

Timestamp = Union[datetime, int]


@dataclass(frozen=True)
class PathMetadata:
    """Metadata about a single filesystem node.

    Attributes:
        type (FileType): Kind of node. ``SYMLINK`` only appears for link-aware queries.
        size (int): Size in bytes. For a symlink, the length of the link text.
        mode (int): Raw ``st_mode`` value, including the file type bits.
        uid (int): Owner user id.
        gid (int): Owner group id.
        major_device (int): Device containing the node (``st_dev``).
        minor_device (int): Device number for device files (``st_rdev``), else 0.
        inode (int): Inode number.
        links (int): Number of hard links.
        atime (Timestamp): Last access time.
        mtime (Timestamp): Last modification time.
        ctime (Timestamp): Last metadata change time.
    """

    type: FileType
    size: int
    mode: int
    uid: int
    gid: int
    major_device: int
    minor_device: int
    inode: int
    links: int
    atime: Timestamp
    mtime: Timestamp
    ctime: Timestamp

    @property
    def permissions(self) -> int:
        """Permission bits of the node, e.g. ``0o644``."""
        return stat_module.S_IMODE(self.mode)

    @property
    def is_dir(self) -> bool:
        return self.type is FileType.DIRECTORY

    @classmethod
    def from_stat_result(cls, result: os.stat_result, time_format: TimeFormat = TimeFormat.LOCAL) -> "PathMetadata":
        """Build a metadata record from an ``os.stat_result``.

        Args:
            result: Value returned by ``os.stat`` or ``os.lstat``.
            time_format: Representation for the three timestamps.

        Returns:
            The corresponding PathMetadata.
        """
        return cls(
            type=file_type_from_mode(result.st_mode),
            size=result.st_size,
            mode=result.st_mode,
            uid=result.st_uid,
            gid=result.st_gid,
            major_device=result.st_dev,
            minor_device=getattr(result, "st_rdev", 0),
            inode=result.st_ino,
            links=result.st_nlink,
            atime=convert_time(result.st_atime, time_format),
            mtime=convert_time(result.st_mtime, time_format),
            ctime=convert_time(result.st_ctime, time_format),
        )


def file_type_from_mode(mode: int) -> FileType:
    if stat_module.S_ISREG(mode):
        return FileType.REGULAR
    if stat_module.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat_module.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat_module.S_ISCHR(mode) or stat_module.S_ISBLK(mode):
        return FileType.DEVICE
    return FileType.OTHER


def convert_time(seconds: float, time_format: TimeFormat) -> Timestamp:
    """Convert a stat timestamp to the requested representation, truncated to whole seconds.

    Example:
        >>> convert_time(86400.75, TimeFormat.POSIX)
        86400
        >>> convert_time(86400.75, TimeFormat.UNIVERSAL).isoformat()
        '1970-01-02T00:00:00+00:00'
    """
    whole = math.floor(seconds)
    if time_format is TimeFormat.POSIX:
        return whole
    if time_format is TimeFormat.UNIVERSAL:
        return datetime.fromtimestamp(whole, tz=timezone.utc)
    return datetime.fromtimestamp(whole)


def parse_time_format(value: Union[str, TimeFormat]) -> TimeFormat:
    """Convert an option value to a TimeFormat.

    Raises:
        ValueError: If ``value`` is not one of "local", "universal" or "posix".
    """
    try:
        return TimeFormat(value)
    except (ValueError, TypeError):
        raise ValueError(f"Unrecognized time format: {value!r}") from None


def stat(path: PathType, time: Union[str, TimeFormat] = TimeFormat.LOCAL) -> Result[PathMetadata]:
    """Return metadata about ``path``, following symbolic links.

    Args:
        path: Path to inspect. Can be any path-like object.
        time: Timestamp representation, one of "local" (default), "universal" or "posix".

    Returns:
        ``Success(PathMetadata)``, ``Failure(<errno name>, path)`` when the query fails,
        or ``Failure(INVALID_OPTION, ("time", time))`` for an unknown time format.

    Example:
        >>> stat("/", time="posix").value.is_dir  # doctest: +SKIP
        True
    """
    return _inspect(os.stat, path, time)


def lstat(path: PathType, time: Union[str, TimeFormat] = TimeFormat.LOCAL) -> Result[PathMetadata]:
    """Return metadata about ``path`` without following a final symbolic link.

    This is exactly the same operation as ``stat`` except when ``path`` is a symbolic
    link: then the metadata describes the link itself (type ``SYMLINK``, its own size
    and timestamps) and not the file the link references.

    Args:
        path: Path to inspect. Can be any path-like object.
        time: Timestamp representation, one of "local" (default), "universal" or "posix".

    Returns:
        ``Success(PathMetadata)``, ``Failure(<errno name>, path)`` when the query fails,
        or ``Failure(INVALID_OPTION, ("time", time))`` for an unknown time format.
    """
    return _inspect(os.lstat, path, time)


def lstat_or_raise(path: PathType, time: Union[str, TimeFormat] = TimeFormat.LOCAL) -> PathMetadata:
    """Same as ``lstat``, but returns the metadata directly.

    Raises:
        FileOperationError: If the query fails or ``time`` is not recognized.
    """
    result = lstat(path, time=time)
    if isinstance(result, Failure):
        raise FileOperationError("read file stats", result.reason, os.fspath(path)) from result.error
    return result.value


def _inspect(
    query: Callable[[PathType], os.stat_result], path: PathType, time: Union[str, TimeFormat]
) -> Result[PathMetadata]:
    try:
        time_format = parse_time_format(time)
    except ValueError:
        return Failure(INVALID_OPTION, ("time", time))

    try:
        result = query(path)
    except OSError as e:
        return Failure.from_os_error(e, os.fspath(path))
    except ValueError as e:
        # Paths with an embedded NUL byte are rejected before reaching the OS
        return Failure("EINVAL", os.fspath(path), error=e)
    return Success(PathMetadata.from_stat_result(result, time_format))

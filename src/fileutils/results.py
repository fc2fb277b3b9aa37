"""Result values returned by the installer, the inspection functions and the tree walker.

Operations in this package report expected failures (a file that already exists, an
unknown option, a malformed entry) as values instead of raising, so callers can branch
on ``result.ok``. OS failures carry the symbolic errno name of the underlying
``OSError`` as their reason.
"""

import errno
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")

MALFORMED_ENTRY = "MALFORMED_ENTRY"
INVALID_OPTION = "INVALID_OPTION"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome, optionally wrapping a value.

    Example:
        >>> Success(42).value
        42
        >>> Success().ok
        True
    """

    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome.

    Attributes:
        reason (str): Symbolic errno name such as ``"EEXIST"``, or one of
            ``MALFORMED_ENTRY`` / ``INVALID_OPTION``.
        detail (Any): What the failure is about. A path for OS failures, the offending
            value for malformed entries, an ``(option, value)`` pair for invalid options.
        error (Optional[BaseException]): The original exception, if any. Not part of
            equality comparisons.

    Example:
        >>> Failure("EEXIST", "hello") == Failure("EEXIST", "hello", error=FileExistsError())
        True
        >>> Failure(INVALID_OPTION, ("time", "bogus")).ok
        False
    """

    reason: str
    detail: Any = None
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_os_error(cls, error: OSError, detail: Any) -> "Failure":
        """Build a failure whose reason is the errno name of ``error``."""
        return cls(os_error_reason(error), detail, error=error)


Result = Union[Success[T], Failure]


def os_error_reason(error: OSError) -> str:
    """Return the symbolic errno name for an OSError, e.g. ``"ENOENT"``.

    Falls back to the exception class name when the error carries no errno.

    Example:
        >>> os_error_reason(FileNotFoundError(errno.ENOENT, "missing"))
        'ENOENT'
        >>> os_error_reason(OSError("no errno"))
        'OSError'
    """
    if error.errno is None:
        return type(error).__name__
    return errno.errorcode.get(error.errno, type(error).__name__)

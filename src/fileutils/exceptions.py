import errno
import os


class FileOperationError(Exception):
    """
    Exception raised by the raising variants of fileutils operations.

    This exception carries the same information a failed result value would, plus a
    human-readable description of the action that was attempted. It is raised by
    ``lstat_or_raise`` for callers that prefer aborting over handling a ``Failure``.

    Attributes:
        action (str): Description of the attempted action, e.g. "read file stats".
        reason (str): Symbolic errno name (e.g. "ENOENT") or a fileutils failure reason
            such as "INVALID_OPTION".
        path (str): The path the action was attempted on.

    Example:
        >>> error = FileOperationError("read file stats", "ENOENT", "/no/such/file")
        >>> str(error)
        'could not read file stats "/no/such/file": no such file or directory'
        >>> error.reason
        'ENOENT'
    """

    def __init__(self, action: str, reason: str, path: str) -> None:
        """
        Initialize the exception with the action, reason and path of the failure.

        Args:
            action (str): Description of the attempted action.
            reason (str): Symbolic errno name or fileutils failure reason.
            path (str): The path the action was attempted on.
        """
        self.action = action
        self.reason = reason
        self.path = path
        super().__init__(f'could not {action} "{path}": {describe_reason(reason)}')


def describe_reason(reason: str) -> str:
    """
    Turn a failure reason into a lowercase human-readable explanation.

    Symbolic errno names are looked up with ``os.strerror``; any other reason is
    returned as a lowercase phrase.

    Example:
        >>> describe_reason("EACCES")
        'permission denied'
        >>> describe_reason("INVALID_OPTION")
        'invalid option'
    """
    code = getattr(errno, reason, None)
    if isinstance(code, int) and reason in errno.errorcode.values():
        return os.strerror(code).lower()
    return reason.replace("_", " ").lower()

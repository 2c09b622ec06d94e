import errno
from typing import Optional


class RootDirectoryError(OSError):
    """
    Exception raised when the root of a tree cannot be mapped at all.

    Failures below the root are absorbed into the tree; failures at the root are
    fatal because there is nothing left to render. The exception keeps the OS error
    number of the underlying failure so the CLI can pick an exit code.

    Attributes:
        errno (int): OS error number of the underlying failure.
        strerror (str): Human-readable description of the failure.
        filename (str): The root path that could not be mapped.

    Example:
        >>> import errno
        >>> error = RootDirectoryError("/missing", errno.ENOENT, "does not exist")
        >>> str(error)
        'Cannot map /missing: does not exist'
        >>> error.is_permission_error
        False
    """

    def __init__(self, path: str, error_number: Optional[int], reason: str) -> None:
        super().__init__(error_number, reason, path)
        self.message = f"Cannot map {path}: {reason}"

    @property
    def is_permission_error(self) -> bool:
        """True when the root could not be read because access was denied."""
        return self.errno in (errno.EACCES, errno.EPERM)

    def __str__(self) -> str:
        return self.message

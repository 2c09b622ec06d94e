"""Classification of OS errors met during a directory walk.

A live filesystem changes underneath a traversal: directories become unreadable,
entries are deleted between listing and stat, and deeply nested names exceed the
platform's path limit. Those conditions are expected churn and only truncate the
subtree where they happen. Any other OSError is unexpected and is reported
louder, although it too is contained to its own subtree.
"""

import errno

RECOVERABLE_ERRNOS = frozenset({errno.EACCES, errno.EPERM, errno.ENAMETOOLONG, errno.ENOENT})

_DESCRIPTIONS = {
    errno.EACCES: "permission denied",
    errno.EPERM: "permission denied",
    errno.ENAMETOOLONG: "name too long",
    errno.ENOENT: "no longer exists",
}


def is_recoverable(exc: OSError) -> bool:
    """Return True if the error belongs to the expected-churn class.

    Example:
        >>> is_recoverable(PermissionError(errno.EACCES, "Permission denied"))
        True
        >>> is_recoverable(OSError(errno.EIO, "Input/output error"))
        False
    """
    if isinstance(exc, (PermissionError, FileNotFoundError)):
        return True
    return exc.errno in RECOVERABLE_ERRNOS


def describe_error(exc: OSError) -> str:
    """Return a short label for an OS error, suitable for log lines.

    Example:
        >>> describe_error(FileNotFoundError(errno.ENOENT, "No such file or directory"))
        'no longer exists'
        >>> describe_error(OSError(errno.EIO, "Input/output error"))
        'Input/output error'
    """
    if isinstance(exc, PermissionError):
        return _DESCRIPTIONS[errno.EACCES]
    if exc.errno in _DESCRIPTIONS:
        return _DESCRIPTIONS[exc.errno]
    return exc.strerror or str(exc)

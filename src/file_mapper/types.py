from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Size recorded for a file whose length could not be read
SIZE_UNKNOWN = -1


class EntryKind(Enum):
    """Enumeration of entry kinds produced during traversal.

    Attributes:
        FILE: Regular file (or anything that is neither a directory nor a symlink)
        DIRECTORY: Directory
        SYMLINK: Symbolic link that was not followed, or a followed link that closes a loop
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class SortBy(str, Enum):
    """Criterion used to order siblings in the tree."""

    NAME = "name"
    SIZE = "size"


class SortDirection(str, Enum):
    """Direction applied to the sort criterion.

    Values mirror the command-line spelling (``asc`` / ``desc``).
    """

    ASCENDING = "asc"
    DESCENDING = "desc"

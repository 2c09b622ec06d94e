"""Device/inode identity used to detect symlink loops."""

import os
from typing import NamedTuple


class FileIdentifier(NamedTuple):
    """Uniquely identifies a directory by its device and inode numbers.

    The builder keeps the identifiers of the directories on the current
    traversal path; meeting one of them again through a followed symlink means
    the link points back at one of its own ancestors.

    Note:
        On Windows, st_ino is synthesized by Python from the file index, which is
        still stable enough for loop detection.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)

    @classmethod
    def for_path(cls, path: str) -> "FileIdentifier":
        """Identify the directory at ``path``, following symlinks.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        return cls.from_stat(os.stat(path))

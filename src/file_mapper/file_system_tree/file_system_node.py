"""Node representation for file system entries in the tree."""

from typing import Any, Optional

from anytree import Node

from file_mapper.types import SIZE_UNKNOWN, EntryKind


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file, directory, or symlink in the tree.

    Extends anytree.Node with the entry's kind, its byte size, and the flags the
    builder sets when it stops short of expanding a directory. Tree navigation
    (children, parent, descendants, leaves) is inherited from anytree.

    anytree reserves ``path``, ``size`` and ``depth`` for tree navigation, so the
    entry's filesystem path and byte count are stored as ``entry_path`` and
    ``size_bytes``.

    Attributes:
        name (str): Base name of the entry.
        entry_path (str): Filesystem path, used for I/O and error messages only.
        kind (EntryKind): File, directory, or symlink.
        size_bytes (int): File length, aggregated directory size, or SIZE_UNKNOWN.
        truncated (bool): True when the directory was not expanded due to the depth cap.
        error (Optional[str]): Why the directory listing was abandoned, if it was.
        symlink_target (Optional[str]): Link target for symlink nodes.

    Example:
        >>> root = FileSystemNode("root", kind=EntryKind.DIRECTORY)
        >>> child = FileSystemNode("file.txt", parent=root, size_bytes=10)
        >>> root.is_dir, child.is_dir
        (True, False)
        >>> child.size_bytes
        10
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        kind: EntryKind = EntryKind.FILE,
        entry_path: str = "",
        size_bytes: int = 0,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.entry_path = entry_path
        self.size_bytes = size_bytes
        self.symlink_target = symlink_target
        self.truncated = False
        self.error: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def size_known(self) -> bool:
        return self.size_bytes != SIZE_UNKNOWN

    def __repr__(self) -> str:
        return f"FileSystemNode({self.name!r}, kind={self.kind.value}, size_bytes={self.size_bytes})"

"""Directory walker that builds a size-annotated FileSystemNode tree.

This module provides the TreeBuilder class, which walks a directory depth-first,
applies exclusion rules before visiting an entry, records file sizes, and
aggregates them into every directory. Failures below the root never abort the
walk: they only truncate the subtree where they happen.
"""

import errno
import logging
import os
import stat
from typing import Iterator, List, NamedTuple, Optional, Set

from file_mapper.exceptions import RootDirectoryError
from file_mapper.exclusion_rules.base_rules import BaseExclusionRules
from file_mapper.file_system_tree.error_classifier import describe_error, is_recoverable
from file_mapper.file_system_tree.file_identifier import FileIdentifier
from file_mapper.file_system_tree.file_system_node import FileSystemNode
from file_mapper.types import SIZE_UNKNOWN, EntryKind, PathType

logger = logging.getLogger(__name__)

LOOP_DETECTED = "[loop detected]"


class _DirectoryFrame(NamedTuple):
    """A directory whose entries are still being visited."""

    node: FileSystemNode
    depth: int
    entries: Iterator[os.DirEntry]
    children: List[FileSystemNode]
    identity: Optional[FileIdentifier]


class TreeBuilder:
    """Builds an in-memory tree of a directory with aggregated sizes.

    The builder is configured once and holds no state between calls to build(),
    so a single instance can map any number of directories.

    Error Handling:
        Errors are sorted into three classes:
        - Recoverable (permission denied, name too long, vanished entry): the
          affected directory is kept with no children and a warning is logged.
        - Unexpected OSError below the root: logged at error level, the directory
          is replaced by an empty placeholder, siblings are still processed.
        - Any failure at the root itself: raised as RootDirectoryError.

        A file whose size cannot be read is kept with size SIZE_UNKNOWN.

    Symbolic Link Behavior:
        By default symlinks are not followed and appear as symlink leaves. With
        follow_symlinks=True, link targets are traversed and a link that leads
        back to a directory on the current path is recorded as a loop instead.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Decides which names to skip.
        max_depth (Optional[int]): Depth at which directories stop being expanded.
            The root is depth 0; None means unlimited.
        follow_symlinks (bool): Whether to traverse symbolic links.

    Example:
        >>> builder = TreeBuilder(max_depth=2)  # doctest: +SKIP
        >>> root = builder.build(".")  # doctest: +SKIP
        >>> root.size_bytes  # doctest: +SKIP
        48213
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = None,
        follow_symlinks: bool = False,
    ) -> None:
        """Initialize a TreeBuilder.

        Args:
            exclusion_rules: Rules for excluding entries by name. Defaults to None.
            max_depth: Maximum depth to expand, or None for unlimited.
            follow_symlinks: Whether to follow symbolic links. Defaults to False.

        Raises:
            ValueError: If max_depth is negative.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth
        self.follow_symlinks = follow_symlinks

    def build(self, root_directory: PathType) -> FileSystemNode:
        """Walk root_directory and return the root node of the built tree.

        Args:
            root_directory: Directory to map. Can be any path-like object.

        Returns:
            The root directory node, with children and sizes fully populated.

        Raises:
            RootDirectoryError: If the root does not exist, is not a directory,
                or cannot be listed.
        """
        root_path = os.path.abspath(os.fspath(root_directory))
        try:
            root_stat = os.stat(root_path)
        except FileNotFoundError as e:
            raise RootDirectoryError(root_path, errno.ENOENT, "no such directory") from e
        except OSError as e:
            raise RootDirectoryError(root_path, e.errno, describe_error(e)) from e
        if not stat.S_ISDIR(root_stat.st_mode):
            raise RootDirectoryError(root_path, errno.ENOTDIR, "not a directory")

        name = os.path.basename(os.path.normpath(root_path)) or root_path
        root = FileSystemNode(name, kind=EntryKind.DIRECTORY, entry_path=root_path)
        ancestors: Set[FileIdentifier] = set()
        try:
            frame = self._open_directory(root, 0, ancestors)
        except OSError as e:
            raise RootDirectoryError(root_path, e.errno, describe_error(e)) from e
        if frame is not None:
            self._walk(frame, ancestors)
        return root

    def _walk(self, root_frame: _DirectoryFrame, ancestors: Set[FileIdentifier]) -> None:
        # Explicit stack; real trees can nest deeper than the recursion limit.
        stack = [root_frame]
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                self._close_directory(frame, ancestors)
                continue

            if self.exclusion_rules is not None and self.exclusion_rules.exclude(entry.name):
                logger.debug("Ignoring %s", entry.path)
                continue

            child = self._build_entry(entry, ancestors)
            frame.children.append(child)
            if child.is_dir:
                child_frame = self._open_subdirectory(child, frame.depth + 1, ancestors)
                if child_frame is not None:
                    stack.append(child_frame)

    def _open_directory(
        self, node: FileSystemNode, depth: int, ancestors: Set[FileIdentifier]
    ) -> Optional[_DirectoryFrame]:
        """List a directory node and return its frame, or None if it is not expanded.

        Raises:
            OSError: If the directory cannot be listed. The caller decides whether
                that is fatal (root) or absorbed into a placeholder.
        """
        if self.max_depth is not None and depth >= self.max_depth:
            node.truncated = True
            return None

        identity = FileIdentifier.for_path(node.entry_path) if self.follow_symlinks else None
        entries = self._list_entries(node.entry_path)
        if identity is not None:
            ancestors.add(identity)
        return _DirectoryFrame(node, depth, iter(entries), [], identity)

    def _open_subdirectory(
        self, node: FileSystemNode, depth: int, ancestors: Set[FileIdentifier]
    ) -> Optional[_DirectoryFrame]:
        try:
            return self._open_directory(node, depth, ancestors)
        except OSError as e:
            # The node stays in the tree as a childless placeholder.
            node.error = describe_error(e)
            if is_recoverable(e):
                logger.warning("Skipping contents of %s: %s", node.entry_path, node.error)
            else:
                logger.error("Error reading directory %s: %s", node.entry_path, e)
            return None

    @staticmethod
    def _close_directory(frame: _DirectoryFrame, ancestors: Set[FileIdentifier]) -> None:
        if frame.identity is not None:
            ancestors.discard(frame.identity)
        frame.node.children = frame.children
        frame.node.size_bytes = sum(child.size_bytes for child in frame.children if child.size_known)

    @staticmethod
    def _list_entries(path: str) -> List[os.DirEntry]:
        # Listing is scoped to this call; nothing stays open while subdirectories are walked.
        with os.scandir(path) as iterator:
            return sorted(iterator, key=lambda entry: entry.name)

    def _build_entry(self, entry: os.DirEntry, ancestors: Set[FileIdentifier]) -> FileSystemNode:
        """Create the node for one directory entry.

        Directories come back childless; the walk expands them.
        """
        try:
            is_link = entry.is_symlink()
        except OSError:
            is_link = False

        if is_link and not self.follow_symlinks:
            return self._symlink_node(entry)

        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False

        if is_dir:
            if is_link:
                try:
                    target_identity = FileIdentifier.for_path(entry.path)
                except OSError:
                    return self._symlink_node(entry)
                if target_identity in ancestors:
                    logger.info("Not following %s: symlink loop", entry.path)
                    return self._symlink_node(entry, target=LOOP_DETECTED)
            return FileSystemNode(entry.name, kind=EntryKind.DIRECTORY, entry_path=entry.path)

        if is_link and not os.path.exists(entry.path):
            # Broken link; there is no target to size.
            return self._symlink_node(entry)

        return self._file_node(entry)

    @staticmethod
    def _file_node(entry: os.DirEntry) -> FileSystemNode:
        try:
            size = entry.stat().st_size
        except OSError as e:
            size = SIZE_UNKNOWN
            if is_recoverable(e):
                logger.warning("Cannot read size of %s: %s", entry.path, describe_error(e))
            else:
                logger.error("Cannot read size of %s: %s", entry.path, e)
        return FileSystemNode(entry.name, kind=EntryKind.FILE, entry_path=entry.path, size_bytes=size)

    @staticmethod
    def _symlink_node(entry: os.DirEntry, target: Optional[str] = None) -> FileSystemNode:
        if target is None:
            try:
                target = os.readlink(entry.path)
            except OSError:
                target = None
        return FileSystemNode(entry.name, kind=EntryKind.SYMLINK, entry_path=entry.path, symlink_target=target)


def build_tree(
    root_directory: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    max_depth: Optional[int] = None,
    follow_symlinks: bool = False,
) -> FileSystemNode:
    """Build the tree for root_directory in one call.

    Convenience wrapper around TreeBuilder for callers that map a single
    directory.

    Raises:
        RootDirectoryError: If the root itself cannot be mapped.
        ValueError: If max_depth is negative.
    """
    builder = TreeBuilder(exclusion_rules=exclusion_rules, max_depth=max_depth, follow_symlinks=follow_symlinks)
    return builder.build(root_directory)

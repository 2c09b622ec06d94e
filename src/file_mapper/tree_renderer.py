"""Text rendering of a built and sorted FileSystemNode tree.

The renderer produces the connector-based tree lines (similar to the Unix
'tree' command) and the summary footer. It never touches the filesystem: every
size it prints was computed by the builder.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from file_mapper.console_colors import ConsoleColors
from file_mapper.file_system_tree.file_system_node import FileSystemNode

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
BLANK = "    "


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary prefixes and one decimal place.

    Args:
        num_bytes: Non-negative number of bytes.

    Returns:
        The formatted size, capped at TB.

    Raises:
        ValueError: If num_bytes is negative.

    Example:
        >>> format_size(0)
        '0 B'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(1073741824)
        '1.0 GB'
    """
    if num_bytes < 0:
        raise ValueError(f"Size must be non-negative, got {num_bytes}")
    if num_bytes == 0:
        return "0 B"

    size = float(num_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f} {SIZE_UNITS[unit]}"


@dataclass(frozen=True)
class TreeSummary:
    """Aggregate counts for a rendered tree.

    Attributes:
        files: File leaves at all depths.
        directories: Directory nodes below the root, at all depths.
        symlinks: Symlink leaves at all depths.
        total_size: The root's aggregated size in bytes.
    """

    files: int
    directories: int
    symlinks: int
    total_size: int


class TreeRenderer:
    """Renders a FileSystemNode tree as lines of text.

    Attributes:
        show_sizes (bool): Whether each line and the summary include sizes.
        colors (ConsoleColors): Styling applied to names, sizes and the summary.

    Example:
        >>> from file_mapper.types import EntryKind
        >>> root = FileSystemNode("root", kind=EntryKind.DIRECTORY)
        >>> src = FileSystemNode("src", parent=root, kind=EntryKind.DIRECTORY)
        >>> _ = FileSystemNode("main.py", parent=src)
        >>> _ = FileSystemNode("README.md", parent=root)
        >>> renderer = TreeRenderer(colors=ConsoleColors(enabled=False))
        >>> print("\\n".join(renderer.render_lines(root)))
        ├── src/
        │   └── main.py
        └── README.md
    """

    def __init__(self, show_sizes: bool = False, colors: Optional[ConsoleColors] = None) -> None:
        self.show_sizes = show_sizes
        self.colors = colors if colors is not None else ConsoleColors()

    def render_lines(self, root: FileSystemNode) -> Iterator[str]:
        """Yield one line per node below root, depth-first in child order.

        The root itself is not rendered; callers print their own header.
        """
        # Explicit stack of (node, prefix, is_last) items, nearest sibling on top.
        stack = self._pending_children(root, "")
        while stack:
            node, prefix, is_last = stack.pop()
            connector = LAST_BRANCH if is_last else BRANCH
            yield f"{prefix}{connector}{self.format_entry(node)}"
            if node.is_dir:
                stack.extend(self._pending_children(node, prefix + (BLANK if is_last else VERTICAL)))

    @staticmethod
    def _pending_children(node: FileSystemNode, prefix: str) -> List[Tuple[FileSystemNode, str, bool]]:
        """Children of node as stack items, last child first so the first pops first."""
        children = node.children
        last = len(children) - 1
        return [(children[index], prefix, index == last) for index in range(last, -1, -1)]

    def format_entry(self, node: FileSystemNode) -> str:
        """Format a single node's name, marker, and optional size."""
        if node.is_dir:
            text = self.colors.directory(f"{node.name}/")
        elif node.is_symlink:
            target = f" -> {node.symlink_target}" if node.symlink_target else ""
            text = self.colors.symlink(f"{node.name}{target}")
        else:
            text = self.colors.file(node.name)

        if self.show_sizes:
            size_text = format_size(node.size_bytes) if node.size_known else "unknown"
            text = f"{text} {self.colors.size(size_text)}"
        return text

    @staticmethod
    def summarize(root: FileSystemNode) -> TreeSummary:
        """Count files, directories and symlinks below root."""
        files = directories = symlinks = 0
        pending = list(root.children)
        while pending:
            node = pending.pop()
            if node.is_dir:
                directories += 1
                pending.extend(node.children)
            elif node.is_symlink:
                symlinks += 1
            else:
                files += 1
        return TreeSummary(files=files, directories=directories, symlinks=symlinks, total_size=root.size_bytes)

    def summary_lines(self, summary: TreeSummary) -> Iterator[str]:
        """Yield the summary footer, starting with a blank separator line."""
        yield ""
        yield self.colors.heading("Summary:")
        yield self._summary_line("Total files:", str(summary.files))
        yield self._summary_line("Total directories:", str(summary.directories))
        if summary.symlinks:
            yield self._summary_line("Total symlinks:", str(summary.symlinks))
        if self.show_sizes:
            yield self._summary_line("Total size:", format_size(summary.total_size))

    def _summary_line(self, label: str, value: str) -> str:
        return f"{self.colors.info(label)} {self.colors.success(value)}"

"""In-memory directory tree: node model, builder, and sorter.

The builder walks a directory once and produces a size-annotated tree of
FileSystemNode objects; the sorter reorders that tree in place.
"""

from .file_system_node import FileSystemNode
from .tree_builder import TreeBuilder, build_tree
from .tree_sorter import sort_tree

__all__ = ["FileSystemNode", "TreeBuilder", "build_tree", "sort_tree"]

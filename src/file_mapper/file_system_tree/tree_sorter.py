"""Recursive in-place ordering of a FileSystemNode tree."""

from functools import cmp_to_key
from typing import Callable

from file_mapper.file_system_tree.file_system_node import FileSystemNode
from file_mapper.types import SortBy, SortDirection

Comparator = Callable[[FileSystemNode, FileSystemNode], int]


def _compare(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def compare_by_name(a: FileSystemNode, b: FileSystemNode) -> int:
    """Order by raw code-point comparison of the base name."""
    return _compare(a.name, b.name)


def compare_by_size(a: FileSystemNode, b: FileSystemNode) -> int:
    """Order by size in bytes, breaking ties by name."""
    return _compare(a.size_bytes, b.size_bytes) or compare_by_name(a, b)


_COMPARATORS = {
    SortBy.NAME: compare_by_name,
    SortBy.SIZE: compare_by_size,
}


def get_comparator(sort_by: SortBy, direction: SortDirection) -> Comparator:
    """Return the sibling comparator for a criterion and direction.

    Descending order swaps the operands rather than negating the result, so a size
    tie under descending order is broken by name in descending order too.

    Example:
        >>> a = FileSystemNode("a", size_bytes=5)
        >>> b = FileSystemNode("b", size_bytes=5)
        >>> get_comparator(SortBy.SIZE, SortDirection.DESCENDING)(a, b)
        1
    """
    compare = _COMPARATORS[SortBy(sort_by)]
    if SortDirection(direction) is SortDirection.DESCENDING:
        return lambda a, b: compare(b, a)
    return compare


def sort_tree(
    node: FileSystemNode,
    sort_by: SortBy = SortBy.NAME,
    direction: SortDirection = SortDirection.ASCENDING,
) -> FileSystemNode:
    """Sort the children of node and of every descendant directory in place.

    Siblings are ordered against each other only; files and directories are not
    grouped. The set of children never changes, only their order, and sorting an
    already sorted tree with the same parameters leaves it unchanged.

    Args:
        node: Root of the (sub)tree to sort.
        sort_by: Criterion to order siblings by. Defaults to NAME.
        direction: Ascending or descending. Defaults to ASCENDING.

    Returns:
        The same node, for chaining.
    """
    key = cmp_to_key(get_comparator(sort_by, direction))
    # Iterative; real trees can nest deeper than the recursion limit.
    pending = [node]
    while pending:
        current = pending.pop()
        if not current.children:
            continue
        current.children = sorted(current.children, key=key)
        pending.extend(child for child in current.children if child.is_dir)
    return node

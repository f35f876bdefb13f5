"""Binary tree height and merging of binary search trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _walk(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield from _walk(root.left)
    yield root.key
    yield from _walk(root.right)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the keys of the tree in in-order sequence."""
    return list(_walk(root))


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def sorted_to_bst(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a balanced search tree from a sorted sequence."""
    if not values:
        return None
    mid = (len(values) - 1) // 2
    return TreeNode(
        values[mid],
        sorted_to_bst(values[:mid]),
        sorted_to_bst(values[mid + 1 :]),
    )


def merge_trees(
    first: Optional[TreeNode], second: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Merge two binary search trees into one balanced binary search tree."""
    return sorted_to_bst(merge_sorted(inorder(first), inorder(second)))
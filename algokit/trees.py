"""Binary tree node type and basic tree algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    if p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced binary search tree from sorted values."""

    def build(start: int, end: int) -> TreeNode | None:
        if start >= end:
            return None
        mid = (start + end) // 2
        return TreeNode(nums[mid], build(start, mid), build(mid + 1, end))

    return build(0, len(nums))
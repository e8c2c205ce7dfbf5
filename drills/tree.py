"""Binary tree puzzles: traversals, shape checks and comparisons."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield root.value
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def edge_height(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""
    return height(root) - 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(height(root.left) - height(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def is_bst(
    root: Optional[TreeNode], low: int | None = None, high: int | None = None
) -> bool:
    """Whether every value lies in (low, high] and the tree is ordered.

    Equal values are allowed in left subtrees only; ``None`` leaves a bound open.
    """
    if root is None:
        return True
    if low is not None and root.value <= low:
        return False
    if high is not None and root.value > high:
        return False
    return is_bst(root.left, low, root.value) and is_bst(root.right, root.value, high)


def count_leaves(root: Optional[TreeNode]) -> int:
    """Number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def is_identical(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def left_view(root: Optional[TreeNode]) -> list[int]:
    """The first value met on each level, walking left before right."""
    view: list[int] = []

    def visit(node: Optional[TreeNode], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.value)
        visit(node.left, level + 1)
        visit(node.right, level + 1)

    visit(root, 0)
    return view


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Values level by level, left to right."""
    if root is None:
        return []
    order: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return order


def is_mirror(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Whether ``second`` is the mirror image of ``first``."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and is_mirror(first.left, second.right)
        and is_mirror(first.right, second.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself."""
    return is_mirror(root, root)
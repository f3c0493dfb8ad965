"""Queries and transformations on binary trees built from :class:`TreeNode`."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional

from treekit.tree import TreeNode


def _inorder_values(root: Optional[TreeNode]) -> Iterator[Any]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return whether two trees have the same shape and the same values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        pending.append((a.left, b.left))
        pending.append((a.right, b.right))
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pending = [(root.left, root.right)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path from the root to a leaf."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def has_path_sum(root: Optional[TreeNode], target_sum: Any) -> bool:
    """Return whether some root-to-leaf path has values adding up to ``target_sum``."""
    pending = [(root, target_sum)] if root is not None else []
    while pending:
        node, remaining = pending.pop()
        if node.left is None and node.right is None:
            if node.value == remaining:
                return True
            continue
        remaining -= node.value
        for child in (node.right, node.left):
            if child is not None:
                pending.append((child, remaining))
    return False


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Read each root-to-leaf path as a decimal number and return their total."""
    total = 0
    pending = [(root, 0)] if root is not None else []
    while pending:
        node, number = pending.pop()
        number = number * 10 + node.value
        if node.left is None and node.right is None:
            total += number
            continue
        for child in (node.right, node.left):
            if child is not None:
                pending.append((child, number))
    return total


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        node.left, node.right = node.right, node.left
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> Any:
    """Return the ``k``-th value (1-based) in inorder, the k-th smallest of a search tree."""
    if k >= 1:
        for position, value in enumerate(_inorder_values(root), start=1):
            if position == k:
                return value
    raise ValueError(f"k={k} is outside the tree's 1..size range")


def minimum_difference(root: Optional[TreeNode]) -> Any:
    """Return the smallest gap between inorder neighbours of a search tree."""
    smallest = None
    previous = None
    seen_any = False
    for value in _inorder_values(root):
        if seen_any:
            gap = value - previous
            if smallest is None or gap < smallest:
                smallest = gap
        previous = value
        seen_any = True
    if smallest is None:
        raise ValueError("a tree needs at least two nodes to have a difference")
    return smallest


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean of the values on each level, from the root downwards."""
    averages: list[float] = []
    queue = deque([root] if root is not None else [])
    while queue:
        width = len(queue)
        total = 0
        for _ in range(width):
            node = queue.popleft()
            total += node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        averages.append(total / width)
    return averages
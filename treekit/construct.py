"""Rebuild binary trees from pairs of traversal sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from treekit.tree import TreeNode


def _positions(inorder: Sequence[Any]) -> dict[Any, int]:
    return {value: index for index, value in enumerate(inorder)}


def _locate(positions: dict[Any, int], value: Any) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"{value!r} does not appear in the inorder sequence") from None


def build_from_preorder_inorder(
    preorder: Sequence[Any], inorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild the tree whose preorder and inorder traversals are given."""
    preorder = list(preorder)
    inorder = list(inorder)
    positions = _positions(inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end or in_start > in_end:
            return None
        root_value = preorder[pre_start]
        split = _locate(positions, root_value)
        left_size = split - in_start
        node = TreeNode(root_value)
        node.left = build(pre_start + 1, pre_start + left_size, in_start, split - 1)
        node.right = build(pre_start + left_size + 1, pre_end, split + 1, in_end)
        return node

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild the tree whose inorder and postorder traversals are given."""
    inorder = list(inorder)
    postorder = list(postorder)
    positions = _positions(inorder)

    def build(in_start: int, in_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if post_start > post_end or in_start > in_end:
            return None
        root_value = postorder[post_end]
        split = _locate(positions, root_value)
        left_size = split - in_start
        node = TreeNode(root_value)
        node.left = build(in_start, split - 1, post_start, post_start + left_size - 1)
        node.right = build(split + 1, in_end, post_start + left_size, post_end - 1)
        return node

    return build(0, len(inorder) - 1, 0, len(postorder) - 1)
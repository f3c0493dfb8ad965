"""A binary tree filled in level order, with traversals, search and deletion."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _leftmost(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    if node is None:
        return None
    if node.value == value:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    else:
        node.left = _delete(node.left, value)
        node.right = _delete(node.right, value)
    return node


class BinaryTree:
    """A binary tree whose new values take the first free slot in level order."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[TreeNode] = None
        for value in values or ():
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Attach ``value`` at the first free child position, scanning level by level."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            if current.left is None:
                current.left = node
                return
            queue.append(current.left)
            if current.right is None:
                current.right = node
                return
            queue.append(current.right)

    def delete(self, value: Any) -> None:
        """Remove nodes holding ``value``; a node with two children takes the
        value of the leftmost node of its right subtree. Absent values are ignored."""
        self.root = _delete(self.root, value)

    def search(self, value: Any) -> bool:
        """Return whether any node holds ``value``."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.value == value:
                return True
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree first, then node, then right subtree."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node first, then left and right subtrees."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values of both subtrees before the node itself."""
        stack = [self.root] if self.root is not None else []
        reversed_order: list[Any] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def level_order(self) -> Iterator[Any]:
        """Yield values breadth first, left to right within each level."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return sum(1 for _ in self.level_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.level_order())!r})"


def _line(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Build a tree from integers and print its traversals, searches and a deletion."""
    parser = argparse.ArgumentParser(description="Demonstrate a level-order binary tree.")
    parser.add_argument("values", nargs="*", type=int, default=[1, 2, 3, 4, 5, 6])
    parser.add_argument("--find", action="append", type=int, dest="find")
    parser.add_argument("--remove", type=int, default=3)
    args = parser.parse_args(argv)

    tree = BinaryTree(args.values)
    print(f"Inorder traversal: {_line(tree.inorder())}")
    print(f"Preorder traversal: {_line(tree.preorder())}")
    print(f"Postorder traversal: {_line(tree.postorder())}")
    print(f"Level order traversal: {_line(tree.level_order())}")
    for target in args.find or [7, 6]:
        print(f"Searching for {target}: {'Found' if target in tree else 'Not Found'}")
    tree.delete(args.remove)
    print(f"Inorder traversal after removing {args.remove}: {_line(tree.inorder())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
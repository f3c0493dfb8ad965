# treekit

A small binary-tree toolkit. It has three parts:

- a tree that fills itself level by level, with the four classic traversals,
- a set of well-known binary-tree algorithms that work on plain `TreeNode` objects,
- functions that rebuild a tree from two of its traversals.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Nodes

`treekit.tree.TreeNode` is a dataclass with the fields `value`, `left` and
`right`. The children default to `None`. Nodes are compared by identity, not by
value. To compare the shape and values of two trees, use `is_same_tree` (see
below).

```python
from treekit.tree import TreeNode

root = TreeNode(1, TreeNode(2), TreeNode(3))
```

## The level-order tree

`treekit.tree.BinaryTree` puts each new value into the first free child slot.
It scans level by level from the left, so the tree stays complete as long as
you only insert. You can pass an iterable of values to the constructor. The
root node is available as `tree.root`, which is `None` for an empty tree.

Each traversal returns an iterator over the values:

```python
from treekit.tree import BinaryTree

tree = BinaryTree([1, 2, 3, 4, 5, 6])

list(tree.inorder())      # [4, 2, 5, 1, 6, 3]
list(tree.preorder())     # [1, 2, 4, 5, 3, 6]
list(tree.postorder())    # [4, 5, 2, 6, 3, 1]
list(tree.level_order())  # [1, 2, 3, 4, 5, 6]

list(tree)                # inorder, as above
len(tree)                 # 6
tree                      # BinaryTree([1, 2, 3, 4, 5, 6])  (level order)

6 in tree                 # True
tree.search(7)            # False

tree.delete(3)
list(tree.inorder())      # [4, 2, 5, 1, 6]
```

Methods for changing and querying the tree:

- `insert(value)` adds one value.
- `delete(value)` removes the nodes that hold `value`:
  - A node with at most one child is replaced by that child.
  - A node with two children takes the value of the leftmost node in its right subtree, and that node is removed instead.
  - Deleting a value that is not present leaves the tree unchanged.
- `search(value)` and `value in tree` tell whether any node holds the value.

### Demonstration command

`treekit-demo` builds a tree from integers. It prints the tree's four traversals, searches it, and then deletes one value and prints the inorder traversal again:

```
treekit-demo
treekit-demo 10 20 30 40 --find 30 --find 99 --remove 20
```

The command takes these arguments:

- The positional values default to `1 2 3 4 5 6`.
- `--find` can be repeated. The default searches are for 7 and then 6.
- `--remove` defaults to 3.

The same entry point is `treekit.tree.main(argv=None)`, which returns 0.

## Algorithms

`treekit.algorithms` works on `TreeNode` roots. Pass `None` for an empty tree.

| Function | Result |
| --- | --- |
| `is_same_tree(p, q)` | whether two trees have the same shape and values |
| `is_symmetric(root)` | whether a tree is its own mirror image (an empty tree is) |
| `max_depth(root)` | number of nodes on the longest root-to-leaf path (0 when empty) |
| `has_path_sum(root, target_sum)` | whether some root-to-leaf path adds up to the target (`False` when empty) |
| `sum_numbers(root)` | total of the decimal numbers spelled by root-to-leaf digit paths |
| `invert_tree(root)` | swaps the children of every node in place and returns the root |
| `kth_smallest(root, k)` | the k-th value in inorder (1-based), i.e. the k-th smallest of a search tree |
| `minimum_difference(root)` | the smallest difference between inorder neighbours of a search tree |
| `average_of_levels(root)` | a list with the mean value of each level, top down |

Two functions raise `ValueError`:

- `kth_smallest` raises it when `k` is outside `1..size`.
- `minimum_difference` raises it when the tree has fewer than two nodes.

```python
from treekit.tree import TreeNode
from treekit.algorithms import max_depth, is_symmetric, average_of_levels

root = TreeNode(1, TreeNode(2), TreeNode(2))
max_depth(root)          # 2
is_symmetric(root)       # True
average_of_levels(root)  # [1.0, 2.0]
```

## Rebuilding a tree from traversals

`treekit.construct` rebuilds a tree of distinct values from two of its
traversals. It returns the root `TreeNode`, or `None` when the sequences are
empty. It raises `ValueError` if a value from the preorder or postorder
sequence is missing from the inorder sequence.

```python
from treekit.construct import build_from_preorder_inorder, build_from_inorder_postorder
from treekit.algorithms import is_same_tree

root = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
same = build_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
is_same_tree(root, same)  # True
```

## What it does not do

`BinaryTree` is not a search tree. Insertion ignores ordering, and
`kth_smallest` and `minimum_difference` only give meaningful answers for trees
you have arranged in search-tree order yourself. The package does not balance
trees, does not store them, and does not draw them.
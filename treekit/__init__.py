"""Binary trees: a level-order tree, traversals, classic tree algorithms and
rebuilding trees from traversals."""

__version__ = "0.1.0"
__all__ = ["tree", "algorithms", "construct"]
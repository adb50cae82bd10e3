"""
Adapters for FlowTree.

Loaders that turn external tree data into the core's index.
"""

from .tree_loader import build_index, load_tree, TreeFormatError

__all__ = ["build_index", "load_tree", "TreeFormatError"]

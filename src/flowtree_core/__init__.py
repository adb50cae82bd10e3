"""
FlowTree Core - Headless library for exploring a read-only hierarchy.

This module provides the navigation state machine, per-layer layout,
frame-based animation and hit-testing used by the FlowTree explorer.
It has no UI dependencies and can be embedded in other applications.

Safety: The supplied tree is never mutated; coordinates are derived per pass.
"""

__version__ = "0.1.0"
__author__ = "FlowTree Team"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "TreeIndex":
        from .services.tree_index import TreeIndex
        return TreeIndex
    elif name == "ExplorerSession":
        from .services.session import ExplorerSession
        return ExplorerSession
    elif name == "build_index":
        from .adapters.tree_loader import build_index
        return build_index
    elif name == "load_tree":
        from .adapters.tree_loader import load_tree
        return load_tree
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "TreeIndex",
    "ExplorerSession",
    "build_index",
    "load_tree",
]

"""
Services for FlowTree.

Headless logic behind the explorer: lookup, layout, navigation,
animation, rendering and input mapping.
"""

from .tree_index import TreeIndex
from .layout import LayoutEngine
from .navigation import NavigationStateMachine
from .animation import AnimationController, frame_at
from .renderer import Renderer
from .input_dispatcher import InputDispatcher, hit_test
from .session import ExplorerSession

__all__ = [
    "TreeIndex",
    "LayoutEngine",
    "NavigationStateMachine",
    "AnimationController",
    "frame_at",
    "Renderer",
    "InputDispatcher",
    "hit_test",
    "ExplorerSession",
]

"""
Domain models for FlowTree.

Contains the node record, view-state variants, animation frames and settings.
"""

from .models import (
    FlowNode,
    PlacedNode,
    AtRoot,
    Viewing,
    Drilling,
    ViewState,
    AnimationFrame,
)
from .enums import ViewPhase, NavAction
from .settings import (
    LayoutSettings,
    AnimationSettings,
    RenderStyle,
    ExplorerSettings,
)

__all__ = [
    # Models
    "FlowNode",
    "PlacedNode",
    "AtRoot",
    "Viewing",
    "Drilling",
    "ViewState",
    "AnimationFrame",
    # Enums
    "ViewPhase",
    "NavAction",
    # Settings
    "LayoutSettings",
    "AnimationSettings",
    "RenderStyle",
    "ExplorerSettings",
]

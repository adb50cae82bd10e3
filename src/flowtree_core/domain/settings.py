"""
Settings dataclasses for FlowTree.

Centralizes layout constants, animation timing and the drawing style so
the services and the Qt layer read the same values.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LayoutSettings:
    """Horizontal row layout parameters."""
    min_spacing: float = 120.0
    max_spacing: float = 300.0
    side_margin: float = 200.0      # Subtracted from canvas width
    min_available: float = 400.0    # Floor for the usable width
    fixed_spacing: Optional[float] = None  # e.g. 200 for the non-responsive row


@dataclass
class AnimationSettings:
    """Drill-in animation timing."""
    total_frames: int = 60
    frame_interval_ms: int = 16     # ~60 fps
    grow: float = 0.7               # Pivot scale reaches 1 + grow


@dataclass
class RenderStyle:
    """All styling parameters for node drawing."""

    # Sizes
    node_radius: float = 60.0
    font_size: float = 20.0

    # Colors
    highlight_color: str = "#60a5fa"   # Fill for the selected node
    root_background: str = "#000"
    outline_color: str = "#222"
    ring_color: str = "#fff"
    text_color: str = "#fff"
    shadow_color: str = "#333"

    # Strokes
    ring_width: float = 6.0
    outline_width: float = 3.0
    shadow_blur: float = 8.0


@dataclass
class ExplorerSettings:
    """Bundle of everything the explorer session needs."""
    layout: LayoutSettings = field(default_factory=LayoutSettings)
    animation: AnimationSettings = field(default_factory=AnimationSettings)
    style: RenderStyle = field(default_factory=RenderStyle)

    # Apply 2^(zoom - (base level + 1)) to node size when zoom runs past the layer
    infinite_zoom: bool = False

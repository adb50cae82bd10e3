"""
Renderer for FlowTree.

Paints the visible layer onto a DrawSurface: one filled circle with a
drop shadow, outline and centered label per node, plus a white ring on
the selected node. During a drill-in the target node is drawn at the
animated scale/fade and its children fly out from it.
"""

import logging
from typing import Optional, Sequence

from ..domain.models import AnimationFrame, Drilling, FlowNode, PlacedNode, ViewState
from ..domain.settings import RenderStyle
from ..ports.surface_port import DrawSurface
from .layout import LayoutEngine
from .tree_index import TreeIndex

logger = logging.getLogger(__name__)


class Renderer:
    """Draws nodes for the current view state and animation frame."""

    def __init__(self, index: TreeIndex, layout: LayoutEngine, style: Optional[RenderStyle] = None):
        self._index = index
        self._layout = layout
        self._style = style or RenderStyle()

    @property
    def style(self) -> RenderStyle:
        return self._style

    def background_color(self, state: ViewState) -> str:
        """Selected node's color, else the pivot's, else neutral at the root."""
        if state.selected_id is not None:
            node = self._index.find_by_id(state.selected_id)
            return node.color if node else self._style.root_background

        pivot = self._index.find_by_id(state.pivot_id)
        if pivot is None or pivot.id == self._index.root_id:
            return self._style.root_background
        return pivot.color

    def node_radius(self, scale: float = 1.0) -> float:
        return self._style.node_radius * scale

    def render(
        self,
        surface: Optional[DrawSurface],
        state: ViewState,
        placed: Sequence[PlacedNode],
        frame: AnimationFrame,
        width: float,
        height: float,
        multiplier: float = 1.0,
    ) -> bool:
        """
        Paint one frame.

        Args:
            surface: Target surface (None = not mounted, nothing is drawn)
            state: Current view state
            placed: Last computed layout for the visible layer
            frame: Animation progress (used while drilling)
            width, height: Canvas size
            multiplier: Visual zoom applied to node size

        Returns:
            True if anything was drawn
        """
        if surface is None or width <= 0 or height <= 0:
            logger.debug("No drawing surface; skipping render")
            return False

        surface.clear(self.background_color(state))

        if isinstance(state, Drilling):
            node = self._index.find_by_id(state.to_id)
            if node is not None:
                self._render_drill(surface, node, frame, width, height, multiplier, state)
                return True

        for p in placed:
            self.draw_node(surface, p, state.selected_id, multiplier, 1.0)
        return True

    def _render_drill(
        self,
        surface: DrawSurface,
        node: FlowNode,
        frame: AnimationFrame,
        width: float,
        height: float,
        multiplier: float,
        state: ViewState,
    ) -> None:
        center_x = width / 2
        center_y = height / 2
        self.draw_node(surface, PlacedNode(node, center_x, center_y), state.selected_id,
                       frame.scale * multiplier, frame.fade)

        # Children travel from the center toward their layout slots
        targets = self._layout.place(self._index.children_of(node.id), width, height)
        t = frame.children_scale
        for target in targets:
            animated = PlacedNode(
                target.node,
                center_x + (target.x - center_x) * t,
                center_y + (target.y - center_y) * t,
            )
            self.draw_node(surface, animated, state.selected_id,
                           frame.children_scale * multiplier, frame.children_fade)

    def draw_node(
        self,
        surface: DrawSurface,
        placed: PlacedNode,
        selected_id: Optional[str],
        scale: float = 1.0,
        fade: float = 1.0,
    ) -> None:
        """Draw a single node at its placed position."""
        style = self._style
        node = placed.node
        radius = self.node_radius(scale)
        is_selected = selected_id == node.id

        surface.fill_circle(
            placed.x, placed.y, radius,
            style.highlight_color if is_selected else node.color,
            opacity=fade,
            shadow_color=style.shadow_color,
            shadow_blur=style.shadow_blur,
        )
        if is_selected:
            surface.stroke_circle(placed.x, placed.y, radius + style.ring_width,
                                  style.ring_color, style.ring_width, opacity=fade)
        surface.stroke_circle(placed.x, placed.y, radius,
                              style.outline_color, style.outline_width, opacity=fade)

        surface.draw_text(placed.x, placed.y, node.label, style.text_color,
                          style.font_size * scale, opacity=fade, bold=True)

"""
Layout engine for FlowTree.

Computes which nodes make up the visible layer and where they sit on
the canvas: a single centered horizontal row, evenly spaced.
"""

import logging
from typing import List, Optional, Sequence

from ..domain.models import FlowNode, PlacedNode, ViewState
from ..domain.settings import LayoutSettings
from .tree_index import TreeIndex

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Per-layer layout.

    Display set selection (first rule that applies):
    1. Pivot is the root and nothing is selected -> the root alone
    2. Target (selected node, else pivot) has children -> its children
    3. Target is a leaf -> its siblings (parent's children)
    4. Otherwise -> the root alone
    """

    def __init__(self, index: TreeIndex, settings: Optional[LayoutSettings] = None):
        self._index = index
        self._settings = settings or LayoutSettings()

    @property
    def settings(self) -> LayoutSettings:
        return self._settings

    # -------------------------------------------------------------------------
    # Display set
    # -------------------------------------------------------------------------

    def display_set(self, pivot_id: Optional[str], selected_id: Optional[str] = None) -> List[FlowNode]:
        """
        Return the ordered nodes of the visible layer.

        Args:
            pivot_id: Current pivot (None = root)
            selected_id: Node being drilled into / kept selected, if any
        """
        root = self._index.root
        pivot_is_root = pivot_id is None or pivot_id == root.id

        if selected_id is None and pivot_is_root:
            return [root]

        target = self._index.find_by_id(selected_id if selected_id is not None else pivot_id)
        if target is None:
            return [root]

        children = self._index.children_of(target.id)
        if children:
            return children

        siblings = self._index.siblings_of(target.id)
        if siblings:
            return siblings

        logger.debug(f"No layer for {target.id!r}; falling back to root")
        return [root]

    def visible_ids(self, state: ViewState) -> List[str]:
        """Ids of the display set for a view state."""
        return [n.id for n in self.display_set(state.pivot_id, state.selected_id)]

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def spacing_for(self, count: int, width: float) -> float:
        """
        Horizontal gap between node centers.

        ``clamp(max(width - margin, min_available) / count, min, max)``,
        or the fixed spacing when configured.
        """
        s = self._settings
        if s.fixed_spacing is not None:
            return s.fixed_spacing
        available = max(width - s.side_margin, s.min_available)
        return max(s.min_spacing, min(s.max_spacing, available / max(1, count)))

    def place(self, nodes: Sequence[FlowNode], width: float, height: float) -> List[PlacedNode]:
        """Lay ``nodes`` out in one row centered on the canvas."""
        count = len(nodes)
        center_x = width / 2
        center_y = height / 2
        spacing = self.spacing_for(count, width)
        return [
            PlacedNode(node, center_x + (i - (count - 1) / 2) * spacing, center_y)
            for i, node in enumerate(nodes)
        ]

    def layout(self, state: ViewState, width: float, height: float) -> List[PlacedNode]:
        """
        Compute the positioned visible layer for a view state.

        Returns [] when the canvas has no area yet (not mounted).
        """
        if width <= 0 or height <= 0:
            logger.debug(f"Skipping layout for {width}x{height} canvas")
            return []
        return self.place(self.display_set(state.pivot_id, state.selected_id), width, height)

"""
Input dispatcher for FlowTree.

Maps pointer clicks and control presses onto navigation transitions.
Clicks are hit-tested against the last computed layout.
"""

import logging
from typing import Optional, Sequence

from ..domain.enums import NavAction
from ..domain.models import PlacedNode
from .navigation import NavigationStateMachine

logger = logging.getLogger(__name__)


def hit_test(placed: Sequence[PlacedNode], x: float, y: float, radius: float) -> Optional[PlacedNode]:
    """
    Return the first node whose circle contains (x, y).

    Nodes are tested in visible-set order; z-index is not consulted.
    """
    r2 = radius * radius
    for p in placed:
        if (x - p.x) ** 2 + (y - p.y) ** 2 <= r2:
            return p
    return None


class InputDispatcher:
    """Turns canvas-local clicks and control presses into transitions."""

    def __init__(self, navigation: NavigationStateMachine):
        self._nav = navigation

    def click(self, placed: Sequence[PlacedNode], x: float, y: float, radius: float) -> bool:
        """
        Handle a pointer click in canvas-local coordinates.

        Hit with children -> drill in; hit on a leaf -> nothing;
        miss -> collapse toward the root.

        Returns:
            True if the navigation state changed
        """
        hit = hit_test(placed, x, y, radius)
        if hit is None:
            logger.debug(f"Background click at ({x:.0f}, {y:.0f})")
            return self._nav.collapse()
        if not hit.node.has_children:
            logger.debug(f"Click on leaf {hit.id!r} ignored")
            return False
        return self._nav.drill_in(hit.id)

    def press(self, action: NavAction) -> bool:
        """Handle a control button (home, zoom in/out, previous/next)."""
        logger.debug(f"Control: {action.value}")
        return self._nav.step(action)

"""
Navigation state machine for FlowTree.

Owns the current view state and defines the legal transitions:
- Home: any state -> AtRoot
- Drill-in: into a node with children (AtRoot/Viewing/Drilling -> Drilling)
- Complete: Drilling -> Viewing once the animation has run
- Drill-out: one layer up (-> Viewing or AtRoot)
- Collapse: background click, step back one layer
- Sibling focus: move the focused index within the visible layer

States are immutable; every transition builds a new one.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from ..domain.enums import NavAction
from ..domain.models import AtRoot, Drilling, FlowNode, ViewState, Viewing
from .layout import LayoutEngine
from .tree_index import TreeIndex

logger = logging.getLogger(__name__)


class NavigationStateMachine:
    """
    Explicit view state plus its transition functions.

    Every command returns True when the state changed.
    """

    def __init__(
        self,
        index: TreeIndex,
        layout: LayoutEngine,
        state: Optional[ViewState] = None,
    ):
        """
        Initialize the state machine.

        Args:
            index: Read-only tree lookup
            layout: Used to resolve the visible layer for focus handling
            state: Initial state (defaults to AtRoot)
        """
        self._index = index
        self._layout = layout
        self._state: ViewState = state if state is not None else AtRoot()

        self._actions: Dict[NavAction, Callable[[], bool]] = {
            NavAction.HOME: self.home,
            NavAction.ZOOM_IN: self.zoom_in,
            NavAction.ZOOM_OUT: self.drill_out,
            NavAction.PREVIOUS: self.focus_previous,
            NavAction.NEXT: self.focus_next,
        }

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def pivot(self) -> FlowNode:
        """Node whose layer is displayed (root when at root)."""
        return self._index.find_by_id(self._state.pivot_id) or self._index.root

    @property
    def selected(self) -> Optional[FlowNode]:
        return self._index.find_by_id(self._state.selected_id)

    @property
    def zoom_level(self) -> int:
        return self._state.zoom_level

    @property
    def focused_index(self) -> int:
        return self._state.focused_index

    def visible_ids(self) -> List[str]:
        return self._layout.visible_ids(self._state)

    def focused_id(self) -> Optional[str]:
        visible = self.visible_ids()
        if 0 <= self._state.focused_index < len(visible):
            return visible[self._state.focused_index]
        return None

    def zoom_multiplier(self) -> float:
        """
        Visual scale for zooming past the displayed layer.

        ``2 ** max(0, zoom_level - (base_level + 1))`` where the base level
        is that of the selected node, else of the pivot.
        """
        base = self.selected or self.pivot
        return 2.0 ** max(0, self._state.zoom_level - (base.level + 1))

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def step(self, action: NavAction) -> bool:
        """Apply a control action (home, zoom, previous/next)."""
        return self._actions[action]()

    def home(self) -> bool:
        return self._apply(AtRoot(), "home")

    def drill_in(self, node_id: str) -> bool:
        """
        Start drilling into ``node_id``.

        Ignored when the node is unknown or has no children. Calling it while
        already drilling restarts the transition.
        """
        node = self._index.find_by_id(node_id)
        if node is None or not node.has_children:
            logger.debug(f"drill_in ignored for {node_id!r}")
            return False

        return self._apply(
            Drilling(to_id=node.id, zoom_level=self._state.zoom_level + 1),
            f"drill_in {node.id}",
        )

    def zoom_in(self) -> bool:
        """
        Zoom-in control.

        At the root this reveals the root's children; deeper, it drills into
        the focused visible node (or the first one).
        """
        if isinstance(self._state, AtRoot):
            return self.drill_in(self._index.root_id)

        visible = self.visible_ids()
        if not visible:
            return False
        index = self._state.focused_index
        target = visible[index] if 0 <= index < len(visible) else visible[0]
        return self.drill_in(target)

    def complete_drill(self) -> bool:
        """Finish the forward animation: the drilled node's children are shown."""
        state = self._state
        if not isinstance(state, Drilling):
            return False
        return self._apply(
            Viewing(pivot_id=state.to_id, zoom_level=state.zoom_level,
                    selected_id=state.to_id, focused_index=state.focused_index),
            f"complete {state.to_id}",
        )

    def drill_out(self) -> bool:
        """
        Zoom-out control: go up one layer.

        At zoom level 1 this returns to the root. Deeper, the pivot's parent
        becomes pivot and stays selected so its children remain visible.
        """
        zoom = self._state.zoom_level
        if zoom <= 0:
            return False
        if zoom == 1:
            return self._apply(AtRoot(), "drill_out to root")

        parent = self._index.parent_of(self._state.pivot_id)
        if parent is None:
            return self._apply(AtRoot(), "drill_out (no parent)")
        return self._apply(
            Viewing(pivot_id=parent.id, zoom_level=zoom - 1, selected_id=parent.id),
            f"drill_out to {parent.id}",
        )

    def collapse(self) -> bool:
        """
        Background click: step back exactly one layer.

        The shown layer belongs to an owner node (the selection or drill
        target, else the pivot; a leaf's layer belongs to its parent). The
        owner's parent becomes pivot and stays selected, so the owner's own
        layer is shown again. An owner without a parent collapses to the root.
        """
        state = self._state
        if isinstance(state, AtRoot):
            return False

        owner = self.selected or self._index.find_by_id(state.pivot_id)
        if owner is not None and not owner.has_children:
            owner = self._index.find_by_id(owner.parent_id)

        # Back-reference only, no path resolution
        parent = self._index.find_by_id(owner.parent_id) if owner else None
        if parent is None:
            return self._apply(AtRoot(), "collapse to root")
        return self._apply(
            Viewing(pivot_id=parent.id, zoom_level=max(1, state.zoom_level - 1),
                    selected_id=parent.id),
            f"collapse to {parent.id}",
        )

    def focus_previous(self) -> bool:
        return self._move_focus(-1)

    def focus_next(self) -> bool:
        return self._move_focus(1)

    def _move_focus(self, delta: int) -> bool:
        count = len(self.visible_ids())
        if count <= 1:
            return False
        index = max(0, min(count - 1, self._state.focused_index + delta))
        if index == self._state.focused_index:
            return False
        self._state = replace(self._state, focused_index=index)
        logger.debug(f"focus -> {index + 1}/{count}")
        return True

    def _apply(self, new_state: ViewState, reason: str) -> bool:
        """Install a new state, resetting focus when the visible layer changes."""
        if new_state == self._state:
            return False

        if self._layout.visible_ids(new_state) != self.visible_ids():
            new_state = replace(new_state, focused_index=0)

        logger.debug(f"{reason}: {self._state.phase.value} -> {new_state.phase.value} "
                     f"(zoom {new_state.zoom_level})")
        self._state = new_state
        return True

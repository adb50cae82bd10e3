"""
Explorer session for FlowTree.

Wires the tree index, layout engine, state machine, animation controller,
renderer and input dispatcher together for one navigation session. The
Qt layer drives it with resize/tick/render calls and control commands.
"""

import logging
from typing import List, Optional

from ..domain.enums import NavAction
from ..domain.models import AnimationFrame, Drilling, PlacedNode, ViewState
from ..domain.settings import ExplorerSettings
from ..ports.surface_port import DrawSurface
from .animation import AnimationController
from .input_dispatcher import InputDispatcher
from .layout import LayoutEngine
from .navigation import NavigationStateMachine
from .renderer import Renderer
from .tree_index import TreeIndex

logger = logging.getLogger(__name__)


class ExplorerSession:
    """
    One interactive exploration of a read-only tree.

    Usage:
        session = ExplorerSession(index)
        session.resize(1280, 720)
        session.click(640, 360)        # drill into the root
        while session.tick():          # once per display frame
            session.render(surface)
    """

    def __init__(self, index: TreeIndex, settings: Optional[ExplorerSettings] = None):
        """
        Initialize the session.

        Args:
            index: Tree to explore (never mutated)
            settings: Layout, animation and style settings
        """
        self._index = index
        self._settings = settings or ExplorerSettings()

        self._layout = LayoutEngine(index, self._settings.layout)
        self._nav = NavigationStateMachine(index, self._layout)
        self._animation = AnimationController(self._settings.animation)
        self._renderer = Renderer(index, self._layout, self._settings.style)
        self._input = InputDispatcher(self._nav)

        self._width = 0.0
        self._height = 0.0
        self._placed: List[PlacedNode] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def index(self) -> TreeIndex:
        return self._index

    @property
    def settings(self) -> ExplorerSettings:
        return self._settings

    @property
    def navigation(self) -> NavigationStateMachine:
        return self._nav

    @property
    def state(self) -> ViewState:
        return self._nav.state

    @property
    def placed(self) -> List[PlacedNode]:
        """Last computed layout (copy)."""
        return list(self._placed)

    @property
    def size(self):
        return self._width, self._height

    @property
    def animating(self) -> bool:
        return self._animation.active

    @property
    def frame(self) -> AnimationFrame:
        return self._animation.current

    @property
    def background_color(self) -> str:
        return self._renderer.background_color(self._nav.state)

    @property
    def multiplier(self) -> float:
        if not self._settings.infinite_zoom:
            return 1.0
        return self._nav.zoom_multiplier()

    @property
    def focus_label(self) -> str:
        """'i / n' for the focused visible node, or '' when nothing is visible."""
        count = len(self._nav.visible_ids())
        if count == 0:
            return ""
        return f"{self._nav.focused_index + 1} / {count}"

    @property
    def can_zoom_out(self) -> bool:
        return self._nav.zoom_level > 0

    @property
    def can_focus_previous(self) -> bool:
        return len(self._nav.visible_ids()) > 1 and self._nav.focused_index > 0

    @property
    def can_focus_next(self) -> bool:
        count = len(self._nav.visible_ids())
        return count > 1 and self._nav.focused_index < count - 1

    # -------------------------------------------------------------------------
    # Layout and frames
    # -------------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Canvas size changed: re-layout without touching the animation."""
        self._width = float(width)
        self._height = float(height)
        self.relayout()

    def relayout(self) -> List[PlacedNode]:
        self._placed = self._layout.layout(self._nav.state, self._width, self._height)
        return self.placed

    def tick(self) -> bool:
        """
        Advance the drill-in animation by one frame.

        Returns:
            True while more frames are pending
        """
        if not self._animation.active:
            return False
        frame = self._animation.advance()
        if frame.finished:
            self._nav.complete_drill()
            self.relayout()
            return False
        return True

    def render(self, surface: Optional[DrawSurface]) -> bool:
        """Paint the current frame; False when nothing could be drawn."""
        return self._renderer.render(
            surface,
            self._nav.state,
            self._placed,
            self._animation.current,
            self._width,
            self._height,
            self.multiplier,
        )

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def click(self, x: float, y: float) -> bool:
        """Pointer click in canvas-local coordinates."""
        before = self._nav.state
        radius = self._renderer.node_radius(self.multiplier)
        return self._after_transition(before, self._input.click(self._placed, x, y, radius))

    def press(self, action: NavAction) -> bool:
        before = self._nav.state
        return self._after_transition(before, self._input.press(action))

    def home(self) -> bool:
        return self.press(NavAction.HOME)

    def zoom_in(self) -> bool:
        return self.press(NavAction.ZOOM_IN)

    def zoom_out(self) -> bool:
        return self.press(NavAction.ZOOM_OUT)

    def focus_previous(self) -> bool:
        return self.press(NavAction.PREVIOUS)

    def focus_next(self) -> bool:
        return self.press(NavAction.NEXT)

    def _after_transition(self, before: ViewState, changed: bool) -> bool:
        if not changed:
            return False

        after = self._nav.state
        if isinstance(after, Drilling):
            # A new drill-in (not a focus move) restarts the animation
            if not isinstance(before, Drilling) or (
                (before.to_id, before.zoom_level) != (after.to_id, after.zoom_level)
            ):
                self._animation.start()
        elif self._animation.active:
            # Drill-out and home are instantaneous
            self._animation.stop()

        self.relayout()
        return True

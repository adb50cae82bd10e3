"""
Explorer ViewModel for the tree explorer canvas.

Manages:
- The headless ExplorerSession (navigation, layout, animation)
- The frame timer driving drill-in animations
- Derived chrome state (background color, focus label, button enablement)

The ExplorerCanvas widget paints from this ViewModel and forwards input;
MainWindow binds the floating controls to it.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .base import BaseViewModel
from flowtree_core.domain.settings import ExplorerSettings
from flowtree_core.ports.surface_port import DrawSurface
from flowtree_core.services.session import ExplorerSession
from flowtree_core.services.tree_index import TreeIndex

logger = logging.getLogger(__name__)


class ExplorerVM(BaseViewModel):
    """
    ViewModel for tree exploration.

    Signals:
        state_changed: Navigation state changed (pivot, zoom, focus)
        frame_changed: Canvas needs a repaint (animation step or relayout)
        background_changed: Canvas background color changed (color string)
    """

    # Signals
    state_changed = pyqtSignal()
    frame_changed = pyqtSignal()
    background_changed = pyqtSignal(str)

    def __init__(
        self,
        index: TreeIndex,
        settings: Optional[ExplorerSettings] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the ViewModel.

        Args:
            index: Tree to explore
            settings: Explorer settings (defaults when None)
            parent: Optional parent QObject
        """
        super().__init__(parent)

        self._session = ExplorerSession(index, settings)
        self._last_values["background"] = self._session.background_color

        self._timer = QTimer(self)
        self._timer.setInterval(self._session.settings.animation.frame_interval_ms)
        self._timer.timeout.connect(self._on_tick)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def session(self) -> ExplorerSession:
        return self._session

    @property
    def background_color(self) -> str:
        return self._session.background_color

    @property
    def focus_label(self) -> str:
        return self._session.focus_label

    @property
    def zoom_level(self) -> int:
        return self._session.state.zoom_level

    @property
    def can_zoom_out(self) -> bool:
        return self._session.can_zoom_out

    @property
    def can_focus_previous(self) -> bool:
        return self._session.can_focus_previous

    @property
    def can_focus_next(self) -> bool:
        return self._session.can_focus_next

    @property
    def animating(self) -> bool:
        return self._session.animating

    # -------------------------------------------------------------------------
    # Canvas Commands
    # -------------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Canvas resized: re-layout immediately, animation untouched."""
        self._session.resize(width, height)
        self.frame_changed.emit()

    def render(self, surface: Optional[DrawSurface]) -> bool:
        return self._session.render(surface)

    def click(self, x: float, y: float) -> None:
        """Pointer click in canvas-local coordinates."""
        self._handle(self._session.click(x, y))

    # -------------------------------------------------------------------------
    # Control Commands
    # -------------------------------------------------------------------------

    def home(self) -> None:
        self._handle(self._session.home())

    def zoom_in(self) -> None:
        self._handle(self._session.zoom_in())

    def zoom_out(self) -> None:
        self._handle(self._session.zoom_out())

    def focus_previous(self) -> None:
        self._handle(self._session.focus_previous())

    def focus_next(self) -> None:
        self._handle(self._session.focus_next())

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _handle(self, changed: bool) -> None:
        if not changed:
            return
        self._sync_timer()
        self._publish()

    def _sync_timer(self) -> None:
        if self._session.animating:
            if not self._timer.isActive():
                self._timer.start()
        elif self._timer.isActive():
            self._timer.stop()

    def _on_tick(self) -> None:
        """One animation frame."""
        if self._session.tick():
            self.frame_changed.emit()
            return
        self._timer.stop()
        logger.debug("Drill-in animation finished")
        self._publish()

    def _publish(self) -> None:
        self.state_changed.emit()
        self._notify_if_changed("background", self._session.background_color,
                                self.background_changed)
        self.frame_changed.emit()

"""
Main Window for FlowTree.

Thin view layer using MVVM pattern:
- ExplorerVM holds navigation state and commands
- This view lays out the canvas and its floating controls and binds them
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut

from flowtree_core.domain.settings import ExplorerSettings
from flowtree_core.services.tree_index import TreeIndex

from ..resources.styles import round_button_style
from ..viewmodels import ExplorerVM
from .explorer_canvas import ExplorerCanvas

logger = logging.getLogger(__name__)

CONTROL_MARGIN = 20


class MainWindow(QMainWindow):
    """Main application window: full-size canvas with overlaid controls."""

    def __init__(self, index: TreeIndex, settings: Optional[ExplorerSettings] = None):
        super().__init__()

        self.setWindowTitle("FlowTree - Hierarchy Explorer")
        self.resize(1280, 800)

        # ViewModel
        self._vm = ExplorerVM(index, settings, parent=self)

        # Setup UI
        self._setup_ui()
        self._setup_shortcuts()

        # Bind ViewModel to UI
        self._bind_viewmodel()
        self._refresh_controls()
        self._apply_background(self._vm.background_color)

    @property
    def vm(self) -> ExplorerVM:
        return self._vm

    # -------------------------------------------------------------------------
    # UI Setup
    # -------------------------------------------------------------------------

    def _setup_ui(self):
        self._canvas = ExplorerCanvas(self._vm, self)
        self.setCentralWidget(self._canvas)

        # Home button - top-left, icon only
        self._home_btn = QPushButton("⌂", self._canvas)
        self._home_btn.setObjectName("homeButton")
        self._home_btn.setFixedSize(80, 80)
        self._home_btn.setToolTip("Go to root")
        self._home_btn.setCursor(Qt.CursorShape.PointingHandCursor)

        # Bottom-right cluster: prev / "i / n" / next, then zoom in / out
        self._controls = QWidget(self._canvas)
        self._controls.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        column = QVBoxLayout(self._controls)
        column.setContentsMargins(0, 0, 0, 0)
        column.setSpacing(8)

        focus_row = QHBoxLayout()
        focus_row.setSpacing(8)
        self._prev_btn = self._nav_button("‹", "Previous visible", 40)
        self._focus_label = QLabel("")
        self._focus_label.setObjectName("focusLabel")
        self._focus_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._next_btn = self._nav_button("›", "Next visible", 40)
        focus_row.addWidget(self._prev_btn)
        focus_row.addWidget(self._focus_label)
        focus_row.addWidget(self._next_btn)
        column.addLayout(focus_row)

        self._zoom_in_btn = self._nav_button("+", "Zoom in", 48)
        self._zoom_out_btn = self._nav_button("−", "Zoom out", 48)
        column.addWidget(self._zoom_in_btn, alignment=Qt.AlignmentFlag.AlignRight)
        column.addWidget(self._zoom_out_btn, alignment=Qt.AlignmentFlag.AlignRight)

        self._controls.adjustSize()

    def _nav_button(self, text: str, tooltip: str, size: int) -> QPushButton:
        btn = QPushButton(text)
        btn.setProperty("navButton", True)
        btn.setFixedSize(size, size)
        btn.setStyleSheet(round_button_style(size))
        btn.setToolTip(tooltip)
        btn.setAccessibleName(tooltip)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        return btn

    def _setup_shortcuts(self):
        bindings = [
            ("Home", self._vm.home),
            ("Left", self._vm.focus_previous),
            ("Right", self._vm.focus_next),
            ("+", self._vm.zoom_in),
            ("=", self._vm.zoom_in),
            ("-", self._vm.zoom_out),
        ]
        for key, slot in bindings:
            QShortcut(QKeySequence(key), self, activated=slot)

    def _bind_viewmodel(self):
        self._home_btn.clicked.connect(self._vm.home)
        self._prev_btn.clicked.connect(self._vm.focus_previous)
        self._next_btn.clicked.connect(self._vm.focus_next)
        self._zoom_in_btn.clicked.connect(self._vm.zoom_in)
        self._zoom_out_btn.clicked.connect(self._vm.zoom_out)

        self._vm.state_changed.connect(self._refresh_controls)
        self._vm.background_changed.connect(self._apply_background)

    # -------------------------------------------------------------------------
    # Binding handlers
    # -------------------------------------------------------------------------

    def _refresh_controls(self):
        self._prev_btn.setEnabled(self._vm.can_focus_previous)
        self._next_btn.setEnabled(self._vm.can_focus_next)
        self._zoom_out_btn.setEnabled(self._vm.can_zoom_out)
        self._focus_label.setText(self._vm.focus_label)
        self._controls.adjustSize()
        self._position_controls()

    def _apply_background(self, color: str):
        logger.debug(f"Background -> {color}")
        self.setStyleSheet(f"QMainWindow {{ background-color: {color}; }}")

    def _position_controls(self):
        self._home_btn.move(8, CONTROL_MARGIN)
        self._controls.move(
            self._canvas.width() - self._controls.width() - CONTROL_MARGIN,
            self._canvas.height() - self._controls.height() - CONTROL_MARGIN,
        )

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._position_controls()

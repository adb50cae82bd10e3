"""
Explorer Canvas - QPainter widget for the tree explorer.

Paints the current layer through the ExplorerVM and forwards left clicks
(in widget-local coordinates) and resizes back to it.
"""

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QMouseEvent, QPaintEvent, QResizeEvent

from ..viewmodels.explorer_vm import ExplorerVM
from .painter_surface import QPainterSurface


class ExplorerCanvas(QWidget):
    """Custom widget drawing one layer of the tree."""

    def __init__(self, vm: ExplorerVM, parent=None):
        super().__init__(parent)
        self._vm = vm

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(400, 300)
        self.setCursor(Qt.CursorShape.ArrowCursor)

        self._vm.frame_changed.connect(self.update)

    def paintEvent(self, event: QPaintEvent):
        """Paint the current frame."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        try:
            self._vm.render(QPainterSurface(painter, QRectF(self.rect())))
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent):
        """Recalculate layout on resize."""
        super().resizeEvent(event)
        self._vm.resize(self.width(), self.height())

    def mousePressEvent(self, event: QMouseEvent):
        """Left click: drill into a node or step back on empty space."""
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._vm.click(pos.x(), pos.y())
            event.accept()
            return
        super().mousePressEvent(event)

"""
QPainter-backed drawing surface.

Adapts the core DrawSurface port to a live QPainter inside paintEvent.
"""

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen

from flowtree_core.ports.surface_port import DrawSurface

# Approximates a canvas drop-shadow: rings of decreasing alpha
SHADOW_STEPS = 4


class QPainterSurface(DrawSurface):
    """DrawSurface that paints through an active QPainter."""

    def __init__(self, painter: QPainter, rect: QRectF, font_family: str = "Segoe UI"):
        self._painter = painter
        self._rect = rect
        self._font_family = font_family

    def clear(self, color: str) -> None:
        self._painter.fillRect(self._rect, QColor(color))

    def fill_circle(self, x, y, radius, color, opacity=1.0, shadow_color="", shadow_blur=0.0):
        if radius <= 0 or opacity <= 0:
            return
        p = self._painter
        p.save()
        p.setOpacity(opacity)
        p.setPen(Qt.PenStyle.NoPen)
        center = QPointF(x, y)

        if shadow_color and shadow_blur > 0:
            shadow = QColor(shadow_color)
            for step in range(SHADOW_STEPS, 0, -1):
                spread = shadow_blur * step / SHADOW_STEPS
                shadow.setAlphaF(0.5 / SHADOW_STEPS)
                p.setBrush(QBrush(shadow))
                p.drawEllipse(center, radius + spread, radius + spread)

        p.setBrush(QBrush(QColor(color)))
        p.drawEllipse(center, radius, radius)
        p.restore()

    def stroke_circle(self, x, y, radius, color, width, opacity=1.0):
        if radius <= 0 or opacity <= 0:
            return
        p = self._painter
        p.save()
        p.setOpacity(opacity)
        p.setPen(QPen(QColor(color), width))
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawEllipse(QPointF(x, y), radius, radius)
        p.restore()

    def draw_text(self, x, y, text, color, size, opacity=1.0, bold=True):
        pixel_size = round(size)
        if pixel_size <= 0 or opacity <= 0:
            return
        p = self._painter
        p.save()
        p.setOpacity(opacity)
        font = QFont(self._font_family)
        font.setPixelSize(pixel_size)
        font.setBold(bold)
        p.setFont(font)
        p.setPen(QPen(QColor(color)))
        # Wide box centered on (x, y); the label is centered inside it
        box = QRectF(x - self._rect.width(), y - size, 2 * self._rect.width(), 2 * size)
        p.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        p.restore()

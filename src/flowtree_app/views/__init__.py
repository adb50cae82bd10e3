"""
Views for FlowTree app: the explorer canvas, its QPainter surface and the main window.
"""

from .explorer_canvas import ExplorerCanvas
from .painter_surface import QPainterSurface
from .main_window import MainWindow

__all__ = ["ExplorerCanvas", "QPainterSurface", "MainWindow"]

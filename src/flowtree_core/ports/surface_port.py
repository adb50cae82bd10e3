"""
Drawing surface port interface.

Defines the contract for the 2D surface the renderer paints onto.
Implementations translate these calls to a concrete backend (QPainter,
an in-memory recorder for tests, ...).
"""

from abc import ABC, abstractmethod


class DrawSurface(ABC):
    """
    Abstract interface for 2D drawing.

    Colors are CSS-style strings ("#60a5fa"). Coordinates are canvas-local
    pixels. Opacity is in [0, 1] and applies to that call only.
    """

    @abstractmethod
    def clear(self, color: str) -> None:
        """Fill the whole surface with a background color."""
        pass

    @abstractmethod
    def fill_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: str,
        opacity: float = 1.0,
        shadow_color: str = "",
        shadow_blur: float = 0.0,
    ) -> None:
        """
        Draw a filled circle.

        Args:
            x, y: Center
            radius: Radius in pixels
            color: Fill color
            opacity: Alpha for fill and shadow
            shadow_color: Drop shadow color (empty = no shadow)
            shadow_blur: Drop shadow blur radius
        """
        pass

    @abstractmethod
    def stroke_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: str,
        width: float,
        opacity: float = 1.0,
    ) -> None:
        """Draw a circle outline."""
        pass

    @abstractmethod
    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        color: str,
        size: float,
        opacity: float = 1.0,
        bold: bool = True,
    ) -> None:
        """Draw text centered horizontally and vertically on (x, y)."""
        pass

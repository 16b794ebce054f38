"""
Canvas protocol - defines the drawing primitives a frame sink may use
"""

from typing import Protocol

Color = tuple[int, int, int]


class Canvas(Protocol):
    """
    Protocol for drawing surfaces.

    Enables multiple rendering backends: Pygame, headless recorders for tests, etc.
    """

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """
        Fill an axis-aligned rectangle.

        Args:
            x: Left edge
            y: Top edge
            width: Rectangle width
            height: Rectangle height
            color: RGB color
        """
        ...

    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        """
        Draw one line of text with its top-left corner at (x, y).
        """
        ...

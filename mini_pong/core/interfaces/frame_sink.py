"""
Frame sink protocol - the three callbacks a host loop drives every frame
"""

from typing import Protocol

from mini_pong.core.interfaces.renderer import Canvas


class FrameSink(Protocol):
    """
    Protocol for anything a host loop can run.

    The host calls ``update`` then ``draw`` once per display refresh and asks
    ``layout`` for the logical canvas size. Implementations stay passive and
    synchronous: they never block, spawn threads or perform I/O.
    """

    def update(self) -> None:
        """
        Advance the simulation by one tick.

        Any exception raised here is treated by the host as fatal.
        """
        ...

    def draw(self, canvas: Canvas) -> None:
        """
        Draw the current state onto the logical canvas.

        Args:
            canvas: Drawing surface sized by ``layout``
        """
        ...

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """
        Get the logical canvas size for a given window size.

        Args:
            outside_width: Actual window width in pixels
            outside_height: Actual window height in pixels

        Returns:
            (width, height) of the logical canvas, scaled by the host
        """
        ...

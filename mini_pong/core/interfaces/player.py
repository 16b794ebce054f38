"""
Input source protocol - defines how a paddle gets its control signals
"""

from typing import Protocol

from mini_pong.core.entities import PaddleInput


class InputSource(Protocol):
    """
    Protocol that all paddle controllers must implement.

    The controller polls each source once per tick; a source reports the
    instantaneous "is currently held" state, there is no event queue.
    """

    def get_input(self) -> PaddleInput:
        """
        Get the control signals for the current tick.

        Returns:
            PaddleInput with move_up and move_down flags
        """
        ...

"""
Protocols connecting the simulation core to its host environment
"""

from mini_pong.core.interfaces.frame_sink import FrameSink
from mini_pong.core.interfaces.player import InputSource
from mini_pong.core.interfaces.renderer import Canvas
from mini_pong.core.interfaces.renderer import Color

__all__ = ["FrameSink", "InputSource", "Canvas", "Color"]

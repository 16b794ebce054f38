"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys
from typing import Any
from typing import Protocol

import pygame

from mini_pong.core.interfaces.frame_sink import FrameSink
from mini_pong.core.interfaces.renderer import Canvas
from mini_pong.core.match import MatchController
from mini_pong.gui.human_player import create_keyboard_inputs
from mini_pong.gui.pygame_renderer import PygameRenderer
from mini_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class EngineError(RuntimeError):
    """Raised when the update/draw cycle fails; always fatal"""


class HostRenderer(Protocol):
    """What the host loop needs from a renderer"""

    window_size: tuple[int, int]

    def handle_events(self) -> dict[str, Any]: ...

    def begin_frame(self, logical_size: tuple[int, int]) -> Canvas: ...

    def present(self) -> None: ...

    def update(self, fps: int | None = None) -> None: ...


class PygameHost:
    """Runs a frame sink: update, draw, present, once per display refresh"""

    def __init__(self, renderer: HostRenderer, fps: int | None = None):
        self.renderer = renderer
        self.fps = fps or game_config.FPS
        self.running = False
        self.frames = 0

    def run(self, sink: FrameSink) -> None:
        """Main loop; returns when the window is closed.

        Raises:
            EngineError: if the sink or the renderer fails during a frame
        """
        self.running = True
        while self.running:
            if self.renderer.handle_events()["quit"]:
                self.running = False
                break

            self.step(sink)
            self.renderer.update(self.fps)

    def step(self, sink: FrameSink) -> None:
        """Runs a single frame"""
        try:
            sink.update()
            canvas = self.renderer.begin_frame(sink.layout(*self.renderer.window_size))
            sink.draw(canvas)
            self.renderer.present()
        except pygame.error as e:
            self.running = False
            raise EngineError(f"Engine failure: {e}") from e
        except Exception as e:
            self.running = False
            raise EngineError(f"Frame {self.frames + 1} failed: {e}") from e
        self.frames += 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mini Pong")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball velocities")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    player_input, enemy_input = create_keyboard_inputs()
    match = MatchController(player_input, enemy_input, seed=args.seed)

    renderer = None
    try:
        renderer = PygameRenderer()
        host = PygameHost(renderer, fps=args.fps)
        logger.info("Starting Pong at %dx%d", *renderer.window_size)
        host.run(match)
    except pygame.error as e:
        logger.critical("Engine failure: %s", e)
        sys.exit(1)
    except EngineError as e:
        logger.critical("%s", e, exc_info=e.__cause__)
        sys.exit(1)
    finally:
        if renderer is not None:
            renderer.cleanup()

    logger.info("Window closed after %d frames, final score %d", host.frames, match.score)
    sys.exit(0)


if __name__ == "__main__":
    main()

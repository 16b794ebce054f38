"""
PyGame renderer for Mini Pong game
"""

from typing import Any

import pygame

from mini_pong.core.interfaces.renderer import Color
from mini_pong.utils.config import game_config


class PygameCanvas:
    """Canvas backed by a pygame surface"""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font):
        self.surface = surface
        self.font = font

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.surface, color, rect)

    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        text_surface = self.font.render(text, False, color)
        self.surface.blit(text_surface, (int(x), int(y)))


class PygameRenderer:
    """Draws on a fixed logical canvas and scales it to the window"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.SCREEN_WIDTH
        self.height = height or game_config.SCREEN_HEIGHT
        self.window_width = self.width * game_config.WINDOW_SCALE
        self.window_height = self.height * game_config.WINDOW_SCALE

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Small font, sized for the logical canvas
        self.font = pygame.font.Font(None, 16)

        self.background_color: Color = game_config.BACKGROUND_COLOR
        self.canvas = PygameCanvas(pygame.Surface((self.width, self.height)), self.font)

    @property
    def window_size(self) -> tuple[int, int]:
        return self.screen.get_size()

    def handle_events(self) -> dict[str, Any]:
        """Process window events"""
        events: dict[str, Any] = {"quit": False}
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events["quit"] = True
        return events

    def begin_frame(self, logical_size: tuple[int, int]) -> PygameCanvas:
        """Returns a cleared canvas of the requested logical size"""
        if self.canvas.surface.get_size() != logical_size:
            self.width, self.height = logical_size
            self.canvas = PygameCanvas(pygame.Surface(logical_size), self.font)
        self.canvas.clear(self.background_color)
        return self.canvas

    def present(self) -> None:
        """Scale the logical canvas to the window and flip"""
        pygame.transform.scale(self.canvas.surface, self.window_size, self.screen)
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        fps = fps or game_config.FPS
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()

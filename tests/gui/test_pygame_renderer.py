"""
Tests for the PyGame renderer, run against the dummy video driver
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from mini_pong.core.match import MatchController  # noqa: E402
from mini_pong.gui.pygame_renderer import PygameCanvas, PygameRenderer  # noqa: E402
from mini_pong.utils.config import game_config  # noqa: E402


@pytest.fixture
def canvas():
    pygame.font.init()
    surface = pygame.Surface((game_config.SCREEN_WIDTH, game_config.SCREEN_HEIGHT))
    yield PygameCanvas(surface, pygame.font.Font(None, 16))
    pygame.font.quit()


def rgb(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    color = surface.get_at((x, y))
    return (color.r, color.g, color.b)


class TestPygameCanvas:
    """Tests for the surface-backed canvas"""

    def test_fill_rect(self, canvas):
        canvas.fill_rect(49.0, 96.0, 8.0, 48.0, (0x80, 0xA0, 0xC0))

        assert rgb(canvas.surface, 49, 96) == (0x80, 0xA0, 0xC0)
        assert rgb(canvas.surface, 56, 143) == (0x80, 0xA0, 0xC0)
        assert rgb(canvas.surface, 57, 96) == (0, 0, 0)
        assert rgb(canvas.surface, 49, 144) == (0, 0, 0)

    def test_draw_text(self, canvas):
        canvas.draw_text("Score: 0", 160, 20, (255, 255, 255))

        lit = [
            (x, y)
            for x in range(160, 220)
            for y in range(20, 36)
            if rgb(canvas.surface, x, y) != (0, 0, 0)
        ]
        assert lit
        assert rgb(canvas.surface, 10, 10) == (0, 0, 0)

    def test_clear(self, canvas):
        canvas.fill_rect(0, 0, 10, 10, (255, 0, 0))
        canvas.clear((0, 0, 0))
        assert rgb(canvas.surface, 5, 5) == (0, 0, 0)

    def test_match_frame(self, canvas):
        MatchController(seed=0).draw(canvas)

        assert rgb(canvas.surface, 53, 120) == game_config.PADDLE_COLOR
        assert rgb(canvas.surface, 267, 120) == game_config.PADDLE_COLOR
        assert rgb(canvas.surface, 160, 120) == game_config.BALL_COLOR


class TestPygameRenderer:
    """Tests for the window renderer"""

    @pytest.fixture
    def renderer(self):
        renderer = PygameRenderer()
        yield renderer
        renderer.cleanup()

    def test_window_is_scaled(self, renderer):
        assert renderer.window_size == (640, 480)
        assert renderer.canvas.surface.get_size() == (320, 240)

    def test_present_scales_canvas(self, renderer):
        canvas = renderer.begin_frame((320, 240))
        canvas.fill_rect(0, 0, 10, 10, (255, 0, 0))

        renderer.present()

        assert rgb(renderer.screen, 19, 19) == (255, 0, 0)
        assert rgb(renderer.screen, 21, 21) == (0, 0, 0)

    def test_begin_frame_clears(self, renderer):
        canvas = renderer.begin_frame((320, 240))
        canvas.fill_rect(0, 0, 10, 10, (255, 0, 0))

        canvas = renderer.begin_frame((320, 240))

        assert rgb(canvas.surface, 5, 5) == (0, 0, 0)

    def test_quit_event(self, renderer):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert renderer.handle_events()["quit"] is True

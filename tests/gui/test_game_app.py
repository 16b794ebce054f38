"""
Tests for the host loop and the entry point
"""

import pygame
import pytest

from mini_pong.core.entities import PaddleInput
from mini_pong.core.match import MatchController
from mini_pong.gui import game_app
from mini_pong.gui.game_app import EngineError, PygameHost, parse_args


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", (x, y, width, height)))

    def draw_text(self, text, x, y, color):
        self.calls.append(("text", text))


class FakeRenderer:
    """Renderer that closes the window after a number of frames"""

    def __init__(self, frames=3):
        self.window_size = (640, 480)
        self.frames = frames
        self.presented = 0
        self.ticks = []
        self.logical_sizes = []
        self.canvas = RecordingCanvas()
        self.cleaned_up = False

    def handle_events(self):
        return {"quit": self.presented >= self.frames}

    def begin_frame(self, logical_size):
        self.logical_sizes.append(logical_size)
        self.canvas = RecordingCanvas()
        return self.canvas

    def present(self):
        self.presented += 1

    def update(self, fps=None):
        self.ticks.append(fps)

    def cleanup(self):
        self.cleaned_up = True


class IdleInput:
    def get_input(self):
        return PaddleInput()


class FailingSink:
    def __init__(self, error):
        self.error = error

    def update(self):
        raise self.error

    def draw(self, canvas):
        pass

    def layout(self, outside_width, outside_height):
        return (320, 240)


class TestPygameHost:
    """Test the host loop"""

    def test_runs_until_window_closed(self):
        renderer = FakeRenderer(frames=3)
        match = MatchController(seed=0)
        host = PygameHost(renderer, fps=30)

        host.run(match)

        assert host.frames == 3
        assert match.count == 3
        assert renderer.presented == 3
        assert renderer.ticks == [30, 30, 30]
        assert not host.running

    def test_layout_sizes_the_canvas(self):
        renderer = FakeRenderer(frames=1)
        host = PygameHost(renderer)

        host.run(MatchController(seed=0))

        assert renderer.logical_sizes == [(320, 240)]

    def test_draws_match(self):
        renderer = FakeRenderer(frames=1)
        PygameHost(renderer).run(MatchController(seed=0))

        kinds = [call[0] for call in renderer.canvas.calls]
        assert kinds == ["rect", "rect", "rect", "text"]
        assert renderer.canvas.calls[-1] == ("text", "Score: 0")

    def test_close_before_first_frame(self):
        renderer = FakeRenderer(frames=0)
        match = MatchController(seed=0)

        PygameHost(renderer).run(match)

        assert match.count == 0

    def test_sink_failure_is_fatal(self):
        renderer = FakeRenderer(frames=5)
        host = PygameHost(renderer)
        error = ValueError("bad frame")

        with pytest.raises(EngineError, match="bad frame") as exc_info:
            host.run(FailingSink(error))

        assert exc_info.value.__cause__ is error
        assert not host.running
        assert renderer.presented == 0

    def test_pygame_error_is_fatal(self):
        renderer = FakeRenderer(frames=5)

        with pytest.raises(EngineError, match="Engine failure"):
            PygameHost(renderer).run(FailingSink(pygame.error("display lost")))


class TestMain:
    """Test the entry point exit codes"""

    def test_normal_close_exits_zero(self, monkeypatch):
        renderer = FakeRenderer(frames=2)
        monkeypatch.setattr(game_app, "PygameRenderer", lambda: renderer)
        monkeypatch.setattr(game_app, "create_keyboard_inputs", lambda: (IdleInput(), IdleInput()))

        with pytest.raises(SystemExit) as exc_info:
            game_app.main(["--seed", "1"])

        assert exc_info.value.code == 0
        assert renderer.cleaned_up

    def test_engine_error_exits_non_zero(self, monkeypatch, caplog):
        renderer = FakeRenderer(frames=2)
        monkeypatch.setattr(game_app, "PygameRenderer", lambda: renderer)

        def broken_update(self):
            raise RuntimeError("tick failed")

        monkeypatch.setattr(MatchController, "update", broken_update)

        with pytest.raises(SystemExit) as exc_info:
            game_app.main([])

        assert exc_info.value.code == 1
        assert renderer.cleaned_up
        assert "tick failed" in caplog.text


def test_parse_args():
    args = parse_args(["--seed", "5", "--fps", "30"])
    assert args.seed == 5
    assert args.fps == 30
    assert not args.verbose

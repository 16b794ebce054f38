"""
Mini Pong game entities: ball, paddles, match state
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from mini_pong.core.collision import ball_hits_wall
from mini_pong.core.collision import ball_past_left_edge
from mini_pong.core.collision import ball_past_right_edge
from mini_pong.core.collision import rects_overlap
from mini_pong.utils.config import game_config


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass
class PaddleInput:
    """Control signals for one paddle, already resolved from the input device"""

    move_up: bool = False
    move_down: bool = False


@dataclass
class MatchState:
    """Score and speed ramp shared between the controller and the ball"""

    score: int = 0
    speed_multiplier: float = 1.0
    count: int = 0


class Paddle:
    """Player paddle, positioned by its center"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = game_config.MOVEMENT_SPEED
        self.field_height = game_config.SCREEN_HEIGHT

    def update(self, move_up: bool, move_down: bool) -> None:
        """Moves the paddle one step per active signal, never leaving the field.

        Both signals are applied in turn, so holding both keys cancels out.
        """
        half_height = self.height / 2
        if move_up and self.position.y - self.speed - half_height >= 0:
            self.position.y -= self.speed
        if move_down and self.position.y + self.speed + half_height <= self.field_height:
            self.position.y += self.speed

    def update_from_input(self, paddle_input: PaddleInput) -> None:
        self.update(paddle_input.move_up, paddle_input.move_down)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (left, top, width, height)"""
        return (
            self.position.x - self.width / 2,
            self.position.y - self.height / 2,
            self.width,
            self.height,
        )

    def copy(self) -> "Paddle":
        """Returns a detached snapshot of this paddle"""
        snapshot = Paddle(self.position.x, self.position.y, self.width, self.height)
        snapshot.speed = self.speed
        snapshot.field_height = self.field_height
        return snapshot


class Ball:
    """Game ball.

    Drawn and collided as a square of side ``size`` centered on ``position``.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size if size is not None else game_config.CIRCLE_RADIUS
        self.field_width = game_config.SCREEN_WIDTH
        self.field_height = game_config.SCREEN_HEIGHT

    def update(
        self,
        player: Paddle,
        enemy: Paddle,
        state: MatchState,
        rng: np.random.Generator,
    ) -> dict[str, list[Any]]:
        """Advances the ball by one tick and returns what happened.

        Every check runs on every tick with no cooldown: a ball overlapping
        a paddle for several ticks flips ``vx`` each time, and a ball
        overlapping both paddles flips it twice.
        """
        events: dict[str, list[Any]] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "resets": [],
        }

        self.position += self.velocity

        # One shared condition for both walls
        if ball_hits_wall(self.get_rect(), self.field_height):
            self.bounce_vertical()
            wall = "top" if self.position.y < self.field_height / 2 else "bottom"
            events["wall_bounces"].append(wall)

        for name, paddle in (("player", player), ("enemy", enemy)):
            if rects_overlap(self.get_rect(), paddle.get_rect()):
                self.bounce_horizontal()
                events["paddle_hits"].append(name)

        if ball_past_right_edge(self.get_rect(), self.field_width):
            state.score += 1
            events["goals"].append({"score": state.score})
            self.reset(rng)
            events["resets"].append("right")

        if ball_past_left_edge(self.get_rect()):
            self.reset(rng)
            events["resets"].append("left")

        # Compounds every tick
        self.velocity *= state.speed_multiplier

        return events

    def reset(self, rng: np.random.Generator) -> None:
        """Snaps the ball to the center with a fresh random velocity"""
        self.position = Vector2D(self.field_width / 2, self.field_height / 2)
        vx, vy = random_velocity(rng)
        self.velocity = Vector2D(vx, vy)

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision square properties (left, top, width, height)"""
        half = self.size / 2
        return (self.position.x - half, self.position.y - half, self.size, self.size)


def random_velocity(rng: np.random.Generator) -> tuple[float, float]:
    """Two independent uniform draws in [-1, 1)"""
    vx, vy = rng.uniform(-1.0, 1.0, size=2)
    return float(vx), float(vy)

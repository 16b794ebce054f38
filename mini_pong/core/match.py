"""
Match controller for Mini Pong
"""

from typing import Any

import numpy as np

from mini_pong.core.entities import Ball
from mini_pong.core.entities import MatchState
from mini_pong.core.entities import Paddle
from mini_pong.core.entities import PaddleInput
from mini_pong.core.entities import random_velocity
from mini_pong.core.interfaces.player import InputSource
from mini_pong.core.interfaces.renderer import Canvas
from mini_pong.utils.config import game_config


class MatchController:
    """Owns both paddles, the ball and the score, and advances them once per tick.

    The match has a single "running" state: there is no pause, win condition
    or game over. The speed multiplier grows every tick without a cap.
    """

    def __init__(
        self,
        player_input: InputSource | None = None,
        enemy_input: InputSource | None = None,
        seed: int | None = None,
    ):
        self.field_width = game_config.SCREEN_WIDTH
        self.field_height = game_config.SCREEN_HEIGHT
        self.player_input = player_input
        self.enemy_input = enemy_input
        self.rng = np.random.default_rng(seed)

        # Integer division keeps the paddles on whole pixels
        self.player = Paddle(self.field_width // 6, self.field_height / 2)
        self.enemy = Paddle(self.field_width - self.field_width // 6, self.field_height / 2)

        vx, vy = random_velocity(self.rng)
        self.ball = Ball(self.field_width / 2, self.field_height / 2, vx, vy)

        self.state = MatchState()
        self.score_position = (game_config.SCORE_X, game_config.SCORE_Y)

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def speed_multiplier(self) -> float:
        return self.state.speed_multiplier

    @property
    def count(self) -> int:
        return self.state.count

    def tick(
        self,
        player_input: PaddleInput | None = None,
        enemy_input: PaddleInput | None = None,
    ) -> dict[str, list[Any]]:
        """Advances the match by one tick and returns the ball events"""
        self.state.count += 1

        self.player.update_from_input(player_input or PaddleInput())
        self.enemy.update_from_input(enemy_input or PaddleInput())

        # The ball only sees snapshots of the paddles
        events = self.ball.update(self.player.copy(), self.enemy.copy(), self.state, self.rng)

        self.state.speed_multiplier += game_config.SPEED_INCREASE

        return events

    def update(self) -> None:
        """Polls both input sources and runs one tick"""
        self.tick(self._poll(self.player_input), self._poll(self.enemy_input))

    @staticmethod
    def _poll(source: InputSource | None) -> PaddleInput:
        if source is None:
            return PaddleInput()
        return source.get_input()

    def draw(self, canvas: Canvas) -> None:
        """Draws paddles, ball and score; reads state only"""
        for paddle in (self.player, self.enemy):
            canvas.fill_rect(*paddle.get_rect(), game_config.PADDLE_COLOR)

        canvas.fill_rect(*self.ball.get_rect(), game_config.BALL_COLOR)

        score_x, score_y = self.score_position
        canvas.draw_text(f"Score: {self.state.score}", score_x, score_y, game_config.TEXT_COLOR)

    render = draw

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """The logical canvas is fixed whatever the window size"""
        return self.field_width, self.field_height

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.velocity.magnitude(),
            "player_position": self.player.position.to_tuple(),
            "enemy_position": self.enemy.position.to_tuple(),
            "score": self.state.score,
            "speed_multiplier": self.state.speed_multiplier,
            "count": self.state.count,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }

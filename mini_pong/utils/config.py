"""
Mini Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation so tests can tweak values temporarily
    model_config = {"validate_assignment": True}

    # Logical canvas (scaled by the host to the window size)
    SCREEN_WIDTH: int = Field(default=320, gt=0, description="Logical canvas width")
    SCREEN_HEIGHT: int = Field(default=240, gt=0, description="Logical canvas height")

    # Ball
    CIRCLE_RADIUS: float = Field(default=16.0, gt=0, description="Ball collision square side")

    # Paddles
    PADDLE_WIDTH: float = Field(default=8.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=48.0, gt=0, description="Paddle height in pixels")
    MOVEMENT_SPEED: float = Field(default=4.0, gt=0, description="Paddle step per tick")

    # Gameplay
    SPEED_INCREASE: float = Field(
        default=0.00001, ge=0, description="Speed multiplier increment per tick"
    )

    # Display
    WINDOW_SCALE: int = Field(default=2, gt=0, description="Window size / logical size")
    WINDOW_TITLE: str = Field(default="Pong", description="Window caption")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    SCORE_Y: int = Field(default=20, ge=0, description="Score text top coordinate")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(0xFF, 0x00, 0x00), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(0x80, 0xA0, 0xC0), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    # Controls (pygame key names)
    PLAYER_KEYS: tuple[str, str] = Field(default=("w", "s"), description="Player up/down")
    ENEMY_KEYS: tuple[str, str] = Field(default=("i", "k"), description="Enemy up/down")

    @field_validator("BACKGROUND_COLOR", "BALL_COLOR", "PADDLE_COLOR", "TEXT_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate that every channel fits in a byte"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be between 0 and 255, got {v}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the canvas is large enough for game elements"""
        min_width = 2 * self.PADDLE_WIDTH + self.CIRCLE_RADIUS
        if self.SCREEN_WIDTH < min_width:
            raise ValueError(f"SCREEN_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, self.CIRCLE_RADIUS)
        if self.SCREEN_HEIGHT < min_height:
            raise ValueError(f"SCREEN_HEIGHT must be at least {min_height} pixels")

        return self

    @property
    def SCORE_X(self) -> int:
        """Score text is anchored at the horizontal center"""
        return self.SCREEN_WIDTH // 2

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.SCREEN_WIDTH * self.WINDOW_SCALE, self.SCREEN_HEIGHT * self.WINDOW_SCALE)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        return self.model_dump()

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)

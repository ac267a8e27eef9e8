"""
Canvas Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for temporary overrides in tests and tools
    model_config = {"validate_assignment": True}

    # Arena dimensions
    ARENA_WIDTH: int = Field(default=500, gt=0, description="Arena width in pixels")
    ARENA_HEIGHT: int = Field(default=300, gt=0, description="Arena height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=5.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=20.0, gt=0, description="Paddle height in pixels")
    PADDLE_OFFSET: float = Field(default=10.0, ge=0, description="Paddle distance from its wall")
    LEFT_PADDLE_Y: float = Field(default=10.0, description="Initial left paddle y")
    RIGHT_PADDLE_Y: float = Field(default=30.0, description="Initial right paddle y")

    # Ball
    BALL_SIZE: float = Field(default=5.0, gt=0, description="Ball side length in pixels")
    SERVE_X: float = Field(default=20.0, description="Serve position x")
    SERVE_Y: float = Field(default=30.0, description="Serve position y")
    SERVE_X_SPEED: float = Field(default=4.0, description="Serve x speed per tick")
    SERVE_Y_SPEED: float = Field(default=2.0, description="Serve y speed per tick")
    ANGLE_ADJUSTMENT: float = Field(default=0.5, gt=0, description="y speed change on edge hit")
    MAX_Y_SPEED: float | None = Field(
        default=None, gt=0, description="Clamp for |y speed|, None keeps it unbounded"
    )

    # Opponent
    COMPUTER_STEP: float = Field(default=2.0, gt=0, description="Computer paddle step per tick")

    # Gameplay
    WINNING_SCORE: int = Field(default=5, gt=0, description="Points needed to end the match")
    TICK_INTERVAL_MS: int = Field(default=30, gt=0, description="Delay between ticks")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color"
    )
    FONT_NAME: str = Field(default="monospace", description="System font for text")
    FONT_SIZE: int = Field(default=30, gt=0, description="Font size in pixels")
    SCORE_MARGIN: int = Field(default=50, ge=0, description="Score distance from the edges")

    @field_validator("SERVE_X_SPEED")
    @classmethod
    def validate_serve_x_speed(cls, v: float) -> float:
        """A ball served without horizontal speed never reaches a wall"""
        if v == 0:
            raise ValueError("SERVE_X_SPEED must not be zero")
        return v

    @field_validator("BACKGROUND_COLOR", "FOREGROUND_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate RGB components"""
        if any(not 0 <= c <= 255 for c in v):
            raise ValueError(f"Color components must be in [0, 255], got {v}")
        return v

    @model_validator(mode="after")
    def validate_arena_dimensions(self) -> "GameConfig":
        """Validate arena is large enough for game elements"""
        min_width = 2 * (self.PADDLE_OFFSET + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.ARENA_WIDTH < min_width:
            raise ValueError(f"ARENA_WIDTH must be at least {min_width} pixels")

        if self.ARENA_HEIGHT < self.PADDLE_HEIGHT:
            raise ValueError(f"ARENA_HEIGHT must be at least {self.PADDLE_HEIGHT} pixels")

        if not (
            0 <= self.SERVE_X <= self.ARENA_WIDTH - self.BALL_SIZE
            and 0 <= self.SERVE_Y <= self.ARENA_HEIGHT - self.BALL_SIZE
        ):
            raise ValueError(
                f"Serve point ({self.SERVE_X}, {self.SERVE_Y}) must lie inside the arena"
            )

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "canvas_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "canvas_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "canvas_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False

    # Fields are copied without re-validation: the loaded config is already consistent
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the replaced ones"""
    for name, new_value in kwargs.items():
        # Recorded first: a model validator rejects the value after it was assigned
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # The old values formed a valid config, so they are restored without re-validation
        for name, value in old_values.items():
            object.__setattr__(game_config, name, value)

"""Game configuration for ASCII Breakout."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from asciibreakout.game.cell import Cell


@dataclass
class GameConfig:
    """Playfield size and pacing.

    The reference playfield is 60x36. ``frame_ms`` is the sleep between
    frames; ball and paddle speeds are counted in frames, so changing it
    changes how fast everything feels.
    """

    width: int = 60
    height: int = 36
    starting_lives: int = 5
    frame_ms: int = 5
    paddle_step_interval: int = 4

    @property
    def paddle_row(self) -> int:
        return (11 * self.height) // 12

    @property
    def observation_shape(self) -> tuple[int, int, int]:
        return (len(Cell), self.height, self.width)

    def validate(self):
        # The level 1 paddle is 20 cells long
        if self.width < 20 or self.height < 12:
            raise ValueError("Playfield must be at least 20x12")
        if self.starting_lives < 1:
            raise ValueError("Must start with at least 1 life")
        if self.frame_ms < 0:
            raise ValueError("Frame delay cannot be negative")
        if self.paddle_step_interval < 1:
            raise ValueError("Paddle step interval must be positive")

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables or .env file."""
        load_dotenv()
        try:
            config = cls(
                starting_lives=int(os.getenv("BREAKOUT_STARTING_LIVES", "5")),
                frame_ms=int(os.getenv("BREAKOUT_FRAME_MS", "5")),
                paddle_step_interval=int(os.getenv("BREAKOUT_PADDLE_STEP", "4")),
            )
        except ValueError as e:
            raise ValueError(f"Invalid BREAKOUT_* environment setting: {e}") from e
        config.validate()
        return config


class GameFactory:

    @staticmethod
    def small() -> GameConfig:
        config = GameConfig(width=20, height=12, starting_lives=3)
        config.validate()
        return config

    @staticmethod
    def default() -> GameConfig:
        config = GameConfig()
        config.validate()
        return config

    @staticmethod
    def custom(width: int, height: int, starting_lives: int = 5) -> GameConfig:
        config = GameConfig(width=width, height=height, starting_lives=starting_lives)
        config.validate()
        return config

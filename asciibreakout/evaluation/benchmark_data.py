"""Data classes for benchmark system."""

from dataclasses import dataclass


@dataclass
class BotPerformance:
    """Performance metrics for a single bot on a single seeded game"""

    bot_name: str
    seed: int
    score: int
    level_reached: int
    lives_left: int
    frames: int
    finished: bool

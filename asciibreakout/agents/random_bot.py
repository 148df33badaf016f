"""
RandomBot for Breakout benchmarking.

Mashes the controls at random, giving a floor for other bots to beat.
"""

import random

from asciibreakout.agents.benchmark_bot_base import LEFT, RIGHT, STAY, BotBase


class RandomBot(BotBase):
    """
    Bot that picks a random action every step.

    Supports seeded random generation for reproducible runs.
    """

    name = "RandomBot"  # Class attribute - accessible without instantiation

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)

    def select_action(self, board):
        return self.rng.choice((STAY, LEFT, RIGHT))

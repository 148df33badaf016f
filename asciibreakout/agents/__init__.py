"""
Bots that play ASCII Breakout through BreakoutEnv.

They are used to benchmark the game balance and to smoke-test the
simulation over long runs.
"""

from .benchmark_bot_base import BotBase
from .random_bot import RandomBot
from .tracking_bot import TrackingBot

__all__ = [
    'BotBase',
    'RandomBot',
    'TrackingBot',
]

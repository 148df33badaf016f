"""
TrackingBot for Breakout benchmarking.

Keeps the middle of the paddle under the ball's column.
"""

from asciibreakout.agents.benchmark_bot_base import LEFT, RIGHT, STAY, BotBase
from asciibreakout.agents.bot_utils import find_ball, find_paddle


class TrackingBot(BotBase):
    """
    Bot that chases the ball horizontally.

    It ignores where the ball is heading, so fast diagonal shots near the
    walls still get past it.

    Args:
        dead_zone: How far the ball may be from the paddle centre before the
                   bot moves.
    """

    name = "TrackingBot"

    def __init__(self, dead_zone: int = 1):
        self.dead_zone = dead_zone

    def select_action(self, board):
        ball = find_ball(board)
        paddle = find_paddle(board)
        if ball is None or paddle is None:
            return STAY

        ball_x = ball[0]
        paddle_x, _, length = paddle
        center = paddle_x + length // 2
        if ball_x < center - self.dead_zone:
            return LEFT
        if ball_x > center + self.dead_zone:
            return RIGHT
        return STAY

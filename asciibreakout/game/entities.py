from dataclasses import dataclass


@dataclass
class Ball:
    """Position and motion of the ball.

    ``x_step`` and ``y_step`` are the number of frames between one-cell moves
    on that axis, so a smaller value is a faster ball. Directions are -1 or +1;
    negative is left/up, positive is right/down.
    """

    x: int
    y: int
    x_step: int = 10
    y_step: int = 10
    x_direction: int = 1
    y_direction: int = 1


@dataclass
class Paddle:
    """``x`` is the leftmost paddle cell, ``y`` the fixed row it slides along."""

    x: int
    y: int
    length: int
    direction: int = 0
    step_interval: int = 4

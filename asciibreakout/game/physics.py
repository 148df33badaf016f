"""Ball movement and collision resolution.

The ball moves on each axis independently: on frame ``f`` it steps along x
when ``f % x_step == 0`` and along y when ``f % y_step == 0``. Collisions are
checked against the cell the ball would enter, in a fixed order: free cell,
corner, side wall, ceiling, paddle, block.
"""

from asciibreakout.game.board import LevelState, Session, destroy_block
from asciibreakout.game.cell import Cell
from asciibreakout.game.entities import Ball
from asciibreakout.game.grid import Grid
from asciibreakout.game.random_source import RandomSource

# Paddle rebounds pick new step intervals in [MIN, MIN + SPREAD)
REBOUND_STEP_MIN = 5
REBOUND_STEP_SPREAD = 8


def move_ball(ball: Ball, grid: Grid, x: int, y: int):
    grid.set(ball.x, ball.y, Cell.EMPTY)
    ball.x = x
    ball.y = y
    grid.set(x, y, Cell.BALL)


def step_ball(
    ball: Ball,
    grid: Grid,
    level_state: LevelState,
    session: Session,
    frame: int,
    rng: RandomSource,
) -> bool:
    """Advance the ball for ``frame``. Returns False once the ball drops out the bottom."""
    next_x, next_y = ball.x, ball.y
    if frame % ball.x_step == 0:
        next_x += ball.x_direction
    if frame % ball.y_step == 0:
        next_y += ball.y_direction

    if next_x == ball.x and next_y == ball.y:
        return True

    if next_y >= grid.height:
        return False

    if 0 <= next_x < grid.width and next_y >= 0 and grid.get(next_x, next_y) == Cell.EMPTY:
        move_ball(ball, grid, next_x, next_y)
    elif ball.y == 0 and ball.x in (0, grid.width - 1):
        ball.x_direction = -ball.x_direction
        ball.y_direction = -ball.y_direction
    elif next_x <= 0 or next_x >= grid.width:
        ball.x_direction = -ball.x_direction
    elif next_y <= 0:
        ball.y_direction = -ball.y_direction
    elif grid.get(next_x, next_y) == Cell.PADDLE:
        ball.y_direction = -ball.y_direction
        if rng.next_bool():
            ball.x_direction = -ball.x_direction
        ball.x_step = rng.next_int(REBOUND_STEP_SPREAD) + REBOUND_STEP_MIN
        ball.y_step = rng.next_int(REBOUND_STEP_SPREAD) + REBOUND_STEP_MIN
    else:
        destroy_block(grid, next_x, next_y, level_state, session)
        if rng.next_bool():
            ball.x_direction = -ball.x_direction
        if rng.next_bool():
            ball.y_direction = -ball.y_direction

    return True

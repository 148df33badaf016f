"""Level board generation and block destruction.

Blocks are always two cells wide. Generation puts the left cell of every
pair on an odd column, which is what lets :func:`destroy_block` find the
other half of a pair from a single hit.
"""

from dataclasses import dataclass

from asciibreakout.game.cell import BLOCK_CELLS, Cell
from asciibreakout.game.entities import Ball, Paddle
from asciibreakout.game.grid import BoardIntegrityError, Grid
from asciibreakout.game.random_source import RandomSource

POINTS_PER_BLOCK = 10
BLOCK_MARGIN = 3
MIN_PADDLE_LENGTH = 10
MAX_PADDLE_LENGTH = 20


@dataclass
class Session:
    """State that lives across levels."""

    level: int = 1
    score: int = 0
    lives: int = 5


@dataclass
class LevelState:
    max_block_y: int
    blocks_left: int = 0


def max_block_row(level: int, height: int) -> int:
    """Row below the last block row. Grows every second level, capped at 5/6 of the height."""
    return height // 3 + min(level // 2, height // 2)


def paddle_length(level: int) -> int:
    return max(MAX_PADDLE_LENGTH - 2 * (level // 3), MIN_PADDLE_LENGTH)


def generate_board(
    grid: Grid,
    level: int,
    max_block_y: int,
    paddle: Paddle,
    ball: Ball,
    rng: RandomSource,
) -> int:
    """Fill ``grid`` for a new level and return the number of block pairs placed.

    The grid is cleared without notifying its listener; repaint the whole
    screen afterwards.
    """
    grid.clear()
    for i in range(paddle.length):
        grid.cells[paddle.y][paddle.x + i] = Cell.PADDLE
    grid.cells[ball.y][ball.x] = Cell.BALL

    blocks = 0
    for x in range(BLOCK_MARGIN, grid.width - BLOCK_MARGIN, 2):
        for y in range(BLOCK_MARGIN, max_block_y):
            color = BLOCK_CELLS[rng.next_int(len(BLOCK_CELLS))]
            grid.cells[y][x] = color
            grid.cells[y][x + 1] = color
            blocks += 1
    return blocks


def pair_offset(x: int) -> int:
    return 1 if x % 2 == 1 else -1


def destroy_block(grid: Grid, x: int, y: int, level_state: LevelState, session: Session):
    """Remove the block pair containing ``(x, y)`` and score it."""
    cell = grid.get(x, y)
    if not cell.is_block:
        raise BoardIntegrityError(f"No block at ({x}, {y}), found {cell.name}")
    partner_x = x + pair_offset(x)
    if not grid.in_bounds(partner_x, y):
        raise BoardIntegrityError(f"Block at ({x}, {y}) has its pair outside the grid")
    partner = grid.get(partner_x, y)
    if partner != cell:
        raise BoardIntegrityError(
            f"Block at ({x}, {y}) is {cell.name} but its pair at ({partner_x}, {y}) is {partner.name}"
        )

    grid.set(x, y, Cell.EMPTY)
    grid.set(partner_x, y, Cell.EMPTY)
    level_state.blocks_left -= 1
    session.score += POINTS_PER_BLOCK

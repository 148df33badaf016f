from asciibreakout.game.cell import Cell
from asciibreakout.game.entities import Paddle
from asciibreakout.game.grid import Grid


def move_paddle(paddle: Paddle, grid: Grid) -> bool:
    """Slide the paddle by ``paddle.direction`` cells, one cell at a time.

    A move that would leave the grid, or push the paddle into the ball, is
    refused entirely; the paddle is never clamped to the obstacle. Returns
    whether the paddle moved.
    """
    direction = paddle.direction
    if direction < 0:
        entered = range(paddle.x + direction, paddle.x)
    elif direction > 0:
        entered = range(paddle.x + paddle.length, paddle.x + paddle.length + direction)
    else:
        return False

    if entered.start < 0 or entered.stop > grid.width:
        return False
    if any(grid.get(x, paddle.y) != Cell.EMPTY for x in entered):
        return False

    for _ in range(abs(direction)):
        if direction < 0:
            grid.set(paddle.x - 1, paddle.y, Cell.PADDLE)
            grid.set(paddle.x + paddle.length - 1, paddle.y, Cell.EMPTY)
            paddle.x -= 1
        else:
            grid.set(paddle.x + paddle.length, paddle.y, Cell.PADDLE)
            grid.set(paddle.x, paddle.y, Cell.EMPTY)
            paddle.x += 1
    return True


def center_paddle(paddle: Paddle, grid: Grid):
    """Put the paddle back in the middle of its row and stop it."""
    paddle.x = (grid.width - paddle.length) // 2
    paddle.direction = 0
    grid.clear_row(paddle.y)
    for i in range(paddle.length):
        grid.set(paddle.x + i, paddle.y, Cell.PADDLE)

"""
Board analysis helpers for bots.

Pure functions over a board given as rows of Cell values, so bots never
need access to the Game itself.
"""

from asciibreakout.game.cell import Cell


def find_ball(board: list[list[Cell]]) -> tuple[int, int] | None:
    """Return the ``(x, y)`` of the ball, or None if it is not on the board."""
    for y, row in enumerate(board):
        for x, cell in enumerate(row):
            if cell == Cell.BALL:
                return (x, y)
    return None


def find_paddle(board: list[list[Cell]]) -> tuple[int, int, int] | None:
    """
    Locate the paddle.

    Returns ``(x, y, length)`` for the first paddle run found scanning from
    the bottom row up, or None if the board has no paddle.
    """
    for y in range(len(board) - 1, -1, -1):
        row = board[y]
        if Cell.PADDLE not in row:
            continue
        x = row.index(Cell.PADDLE)
        length = 0
        while x + length < len(row) and row[x + length] == Cell.PADDLE:
            length += 1
        return (x, y, length)
    return None

from enum import IntEnum


class Cell(IntEnum):
    """What occupies one square of the playfield.

    Values are semantic tags only. How a cell looks is decided by the
    front ends, see ``game_params``.
    """

    EMPTY = 0
    BALL = 1
    PADDLE = 2
    RED_BLOCK = 3
    BLUE_BLOCK = 4
    GREEN_BLOCK = 5

    @property
    def is_block(self) -> bool:
        return self in BLOCK_CELLS


# Order matters: board generation picks a color by index into this tuple.
BLOCK_CELLS = (Cell.RED_BLOCK, Cell.BLUE_BLOCK, Cell.GREEN_BLOCK)

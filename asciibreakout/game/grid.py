from typing import Callable

import numpy as np

from asciibreakout.game.cell import Cell


class BoardIntegrityError(ValueError):
    """Raised when a caller breaks a grid contract, e.g. destroying an empty cell."""


CellListener = Callable[[int, int, Cell], None]


class Grid:
    """The playfield, addressed as ``(x, y)`` with ``(0, 0)`` in the top-left corner.

    Every write goes through :meth:`set`, which forwards the change to the
    listener (usually a render surface) right away.
    """

    def __init__(self, width: int, height: int, listener: CellListener | None = None):
        self.width = width
        self.height = height
        self.listener = listener
        self.cells = [[Cell.EMPTY for _ in range(width)] for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[y][x]

    def set(self, x: int, y: int, cell: Cell):
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        self.cells[y][x] = cell
        if self.listener is not None:
            self.listener(x, y, cell)

    def clear(self):
        # Bulk reset, the caller repaints the whole screen afterwards
        for row in self.cells:
            for x in range(self.width):
                row[x] = Cell.EMPTY

    def clear_row(self, y: int):
        for x in range(self.width):
            self.set(x, y, Cell.EMPTY)

    def get_board(self) -> list[list[Cell]]:
        """Return a copy of the cells, one list per row."""
        return [row.copy() for row in self.cells]

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.cells)

    def count_blocks(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_block)

    def to_array(self) -> np.ndarray:
        return np.array(self.cells, dtype=np.int8)

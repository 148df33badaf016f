"""
Interfaces between the simulation and its front ends.

The game pushes cell changes, footer values and messages to a RenderSurface
and never reads anything back. Keys come from an InputSource.
"""

from abc import ABC, abstractmethod

from asciibreakout.game.cell import Cell
from asciibreakout.game.keys import Key


class RenderSurface(ABC):

    @abstractmethod
    def set_cell(self, x: int, y: int, cell: Cell):
        """Draw one playfield cell."""
        pass

    @abstractmethod
    def clear_screen(self):
        pass

    @abstractmethod
    def draw_frame(self):
        """Draw the border around the playfield and the title."""
        pass

    @abstractmethod
    def set_footer(self, field: str, value: int):
        """Update one of the ``lives``, ``level`` or ``score`` counters."""
        pass

    @abstractmethod
    def show_message(self, lines: list[str]):
        """Print already formatted lines centered on the playfield."""
        pass

    def refresh(self):
        pass


class InputSource(ABC):

    @abstractmethod
    def poll_key(self) -> Key | None:
        """Return the next pressed key without blocking, or None."""
        pass

    @abstractmethod
    def wait_key(self) -> Key | None:
        """Block until any key is pressed.

        Returns ``Key.QUIT`` if the player closed the game instead of pressing
        a key, otherwise None.
        """
        pass


class NullSurface(RenderSurface):
    """Surface for headless runs."""

    def set_cell(self, x, y, cell):
        pass

    def clear_screen(self):
        pass

    def draw_frame(self):
        pass

    def set_footer(self, field, value):
        pass

    def show_message(self, lines):
        pass


class NullInput(InputSource):
    """Never presses anything and never waits."""

    def poll_key(self):
        return None

    def wait_key(self):
        pass

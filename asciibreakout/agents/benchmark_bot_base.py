"""
Base interface for benchmark bots.

Bots pick an environment action from the current board without learning
or persistence.
"""

from abc import ABC, abstractmethod

from asciibreakout.game.cell import Cell

STAY = 0
LEFT = 1
RIGHT = 2


class BotBase(ABC):
    """
    Abstract base class for bots that steer the paddle.

    Actions follow BreakoutEnv: 0 keeps the paddle still, 1 moves it left,
    2 moves it right.
    """

    name = "BotBase"

    @abstractmethod
    def select_action(self, board: list[list[Cell]]) -> int:
        """
        Select the next action given the current board state.

        Args:
            board: Rows of Cell values, as returned by Grid.get_board()

        Returns:
            One of STAY, LEFT or RIGHT
        """
        pass

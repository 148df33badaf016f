"""
Shared test doubles for ASCII Breakout tests.

- ScriptedRandom: replays fixed draws so bounces and boards are predictable
- RecordingSurface: remembers everything the game drew
- ScriptedInput: feeds a fixed list of key presses
"""

import pytest

from asciibreakout.game.game_config import GameFactory
from asciibreakout.game.grid import Grid
from asciibreakout.game.random_source import RandomSource
from asciibreakout.ui.surface import InputSource, RenderSurface


class ScriptedRandom(RandomSource):
    """Returns queued values first, then the defaults. Records every bound asked for."""

    def __init__(self, ints=None, bools=None, default_int=0, default_bool=False):
        self.ints = list(ints or [])
        self.bools = list(bools or [])
        self.default_int = default_int
        self.default_bool = default_bool
        self.bounds = []

    def next_int(self, bound):
        self.bounds.append(bound)
        value = self.ints.pop(0) if self.ints else self.default_int
        assert 0 <= value < bound, f"scripted {value} outside [0, {bound})"
        return value

    def next_bool(self):
        return self.bools.pop(0) if self.bools else self.default_bool


class RecordingSurface(RenderSurface):

    def __init__(self):
        self.cells = []
        self.footers = {}
        self.messages = []
        self.clears = 0
        self.frames_drawn = 0
        self.refreshes = 0

    def set_cell(self, x, y, cell):
        self.cells.append((x, y, cell))

    def clear_screen(self):
        self.clears += 1

    def draw_frame(self):
        self.frames_drawn += 1

    def set_footer(self, field, value):
        self.footers[field] = value

    def show_message(self, lines):
        self.messages.append(list(lines))

    def refresh(self):
        self.refreshes += 1


class ScriptedInput(InputSource):

    def __init__(self, keys=None, wait_results=None):
        self.keys = list(keys or [])
        self.wait_results = list(wait_results or [])
        self.waits = 0

    def poll_key(self):
        return self.keys.pop(0) if self.keys else None

    def wait_key(self):
        self.waits += 1
        return self.wait_results.pop(0) if self.wait_results else None


@pytest.fixture
def config():
    return GameFactory.default()


@pytest.fixture
def grid(config):
    return Grid(config.width, config.height)


@pytest.fixture
def recording_grid(config):
    changes = []
    grid = Grid(config.width, config.height, listener=lambda x, y, cell: changes.append((x, y, cell)))
    return grid, changes


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def scripted_input():
    return ScriptedInput

"""Curses front end.

The playfield is drawn inside a border, offset by two columns and two rows
from the top-left of the terminal. The footer sits under the bottom border.
"""

import curses

from asciibreakout.game.cell import Cell
from asciibreakout.game.game_config import GameConfig
from asciibreakout.game.game_params import (
    BALL_GLYPH,
    BLOCK_GLYPHS,
    FOOTER_FORMATS,
    FOOTER_GAP,
    FOOTER_X,
    LEVEL_FOOTER,
    LIVES_FOOTER,
    SCORE_FOOTER,
    TITLE,
)
from asciibreakout.game.keys import Key, key_for_char
from asciibreakout.ui.surface import InputSource, RenderSurface

OFFSET = 2

# curses color pair numbers
BORDER_PAIR = 1
TITLE_PAIR = 2
LIVES_PAIR = 3
LEVEL_PAIR = 4
SCORE_PAIR = 5
PADDLE_PAIR = 6
RED_PAIR = 7
BLUE_PAIR = 8
GREEN_PAIR = 9

CELL_PAIRS = {
    Cell.PADDLE: PADDLE_PAIR,
    Cell.RED_BLOCK: RED_PAIR,
    Cell.BLUE_BLOCK: BLUE_PAIR,
    Cell.GREEN_BLOCK: GREEN_PAIR,
}

ARROW_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}


def init_colors():
    curses.start_color()
    curses.init_pair(BORDER_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(TITLE_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
    curses.init_pair(LIVES_PAIR, curses.COLOR_MAGENTA, curses.COLOR_BLACK)
    curses.init_pair(LEVEL_PAIR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    curses.init_pair(SCORE_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
    curses.init_pair(PADDLE_PAIR, curses.COLOR_BLACK, curses.COLOR_MAGENTA)
    curses.init_pair(RED_PAIR, curses.COLOR_BLACK, curses.COLOR_RED)
    curses.init_pair(BLUE_PAIR, curses.COLOR_BLACK, curses.COLOR_BLUE)
    curses.init_pair(GREEN_PAIR, curses.COLOR_BLACK, curses.COLOR_GREEN)


def footer_positions() -> dict[str, int]:
    """Column where each footer label starts."""
    lives_x = FOOTER_X + len(TITLE) + FOOTER_GAP
    level_x = lives_x + len(LIVES_FOOTER) + FOOTER_GAP
    score_x = level_x + len(LEVEL_FOOTER) + FOOTER_GAP
    return {"lives": lives_x, "level": level_x, "score": score_x}


class CursesSurface(RenderSurface):

    labels = {
        "lives": (LIVES_FOOTER, LIVES_PAIR),
        "level": (LEVEL_FOOTER, LEVEL_PAIR),
        "score": (SCORE_FOOTER, SCORE_PAIR),
    }

    def __init__(self, screen, config: GameConfig):
        self.screen = screen
        self.config = config
        self.footer_y = config.height + OFFSET + 1
        self.footer_x = footer_positions()
        rows, cols = screen.getmaxyx()
        if rows < self.footer_y + 1 or cols < config.width + OFFSET * 2:
            raise ValueError(
                f"Terminal is {cols}x{rows}, need at least "
                f"{config.width + OFFSET * 2}x{self.footer_y + 1}"
            )
        curses.curs_set(0)
        init_colors()

    def _put(self, y: int, x: int, text: str, attr: int = 0):
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            rows, cols = self.screen.getmaxyx()
            if y != rows - 1 or x + len(text) != cols:
                raise

    def set_cell(self, x, y, cell):
        if cell == Cell.BALL:
            glyph, attr = BALL_GLYPH, curses.A_BOLD
        elif cell == Cell.EMPTY:
            glyph, attr = " ", 0
        elif cell == Cell.PADDLE:
            glyph, attr = " ", curses.color_pair(PADDLE_PAIR)
        else:
            # Left half of a pair is on an odd column
            glyph = BLOCK_GLYPHS[0] if x % 2 == 1 else BLOCK_GLYPHS[1]
            attr = curses.color_pair(CELL_PAIRS[cell])
        self._put(y + OFFSET, x + OFFSET, glyph, attr)

    def clear_screen(self):
        self.screen.erase()

    def draw_frame(self):
        border = curses.color_pair(BORDER_PAIR)
        width, height = self.config.width, self.config.height
        self._put(OFFSET - 1, OFFSET, "_" * width, border)
        for y in range(OFFSET, height + OFFSET):
            self._put(y, OFFSET - 1, "{", border)
            self._put(y, width + OFFSET, "}", border)
        self._put(height + OFFSET, OFFSET - 1, "{" + "_" * width + "}", border)
        self._put(self.footer_y, FOOTER_X, TITLE, curses.color_pair(TITLE_PAIR))

    def set_footer(self, field, value):
        label, pair = self.labels[field]
        x = self.footer_x[field]
        self._put(self.footer_y, x, label, curses.color_pair(pair))
        self._put(self.footer_y, x + len(label), FOOTER_FORMATS[field].format(value))

    def show_message(self, lines):
        top = self.config.height // 2 + OFFSET - len(lines) // 2
        for i, line in enumerate(lines):
            x = self.config.width // 2 + OFFSET - len(line) // 2
            self._put(top + i, max(x, OFFSET), line, curses.A_BOLD)

    def refresh(self):
        self.screen.refresh()


class CursesInput(InputSource):

    def __init__(self, screen):
        self.screen = screen
        self.screen.nodelay(True)
        self.screen.keypad(True)

    def poll_key(self):
        code = self.screen.getch()
        if code == -1:
            return None
        if code in ARROW_KEYS:
            return ARROW_KEYS[code]
        if 0 <= code < 256:
            return key_for_char(chr(code))
        return None

    def wait_key(self):
        self.screen.nodelay(False)
        try:
            self.screen.getch()
        finally:
            self.screen.nodelay(True)

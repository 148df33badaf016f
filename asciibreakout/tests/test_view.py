import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from asciibreakout.game.cell import Cell
from asciibreakout.game.game_config import GameFactory
from asciibreakout.game.game_params import COLORS, GAP, TILE_SIZE
from asciibreakout.game.keys import Key
from asciibreakout.ui.View import PygameInput, View


@pytest.fixture
def view():
    view = View(GameFactory.custom(width=30, height=18))
    yield view
    pygame.quit()


def tile_center(x, y):
    return (GAP + x * TILE_SIZE + TILE_SIZE // 2, GAP + y * TILE_SIZE + TILE_SIZE // 2)


def pixel(view, pos):
    return tuple(view.screen.get_at(pos))[:3]


class TestView:
    """Test drawing with the dummy video driver"""

    def test_screen_size(self, view):
        assert view.screen_width == GAP * 2 + TILE_SIZE * 30
        assert view.screen.get_size() == (view.screen_width, view.screen_height)

    def test_cells_are_colored_by_tag(self, view):
        view.clear_screen()
        view.set_cell(3, 3, Cell.RED_BLOCK)
        view.set_cell(10, 16, Cell.PADDLE)

        assert pixel(view, tile_center(3, 3)) == COLORS[Cell.RED_BLOCK]
        assert pixel(view, tile_center(10, 16)) == COLORS[Cell.PADDLE]
        assert pixel(view, tile_center(5, 5)) == COLORS[Cell.EMPTY]

    def test_empty_cell_erases(self, view):
        view.set_cell(4, 4, Cell.PADDLE)
        view.set_cell(4, 4, Cell.EMPTY)
        assert pixel(view, tile_center(4, 4)) == COLORS[Cell.EMPTY]

    def test_text_and_refresh(self, view):
        view.draw_frame()
        view.set_footer("score", 120)
        view.show_message(["Level: 1", "Press any key to continue"])
        view.refresh()
        assert view.footer["score"] == 120


class TestPygameInput:
    """Test key translation from pygame events"""

    def post_key(self, key, unicode=""):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0))

    def test_keys(self, view):
        keys = PygameInput()
        pygame.event.clear()
        self.post_key(pygame.K_j, "j")
        self.post_key(pygame.K_RIGHT)
        self.post_key(pygame.K_x, "x")
        self.post_key(pygame.K_q, "q")

        assert keys.poll_key() is Key.LEFT
        assert keys.poll_key() is Key.RIGHT
        assert keys.poll_key() is Key.QUIT
        assert keys.poll_key() is None

    def test_window_close_quits(self, view):
        keys = PygameInput()
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert keys.poll_key() is Key.QUIT

    def test_wait_key_returns_on_key(self, view):
        keys = PygameInput()
        pygame.event.clear()
        self.post_key(pygame.K_SPACE, " ")
        assert keys.wait_key() is None
        assert keys.poll_key() is None

    def test_window_close_during_wait_quits_at_once(self, view):
        keys = PygameInput()
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        assert keys.wait_key() is Key.QUIT
        assert keys.poll_key() is None

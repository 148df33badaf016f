import pygame

from asciibreakout.game.cell import Cell
from asciibreakout.game.game_config import GameConfig
from asciibreakout.game.game_params import (
    BORDER_COLOR,
    COLORS,
    FOOTER_FORMATS,
    FOOTER_HEIGHT,
    GAP,
    LEVEL_FOOTER,
    LIVES_FOOTER,
    SCORE_FOOTER,
    TEXT_COLOR,
    TILE_SIZE,
    TITLE,
)
from asciibreakout.game.keys import Key, key_for_char
from asciibreakout.ui.surface import InputSource, RenderSurface

LABELS = {"lives": LIVES_FOOTER, "level": LEVEL_FOOTER, "score": SCORE_FOOTER}


class View(RenderSurface):
    """Draws the playfield as colored tiles in a pygame window."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.footer = {"lives": 0, "level": 0, "score": 0}

        # Calculate screen dimensions based on config
        self.screen_width = GAP + TILE_SIZE * config.width + GAP
        self.screen_height = GAP + TILE_SIZE * config.height + GAP + FOOTER_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption(TITLE)
        self.font = pygame.font.Font(None, 28)

    def tile_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(GAP + x * TILE_SIZE, GAP + y * TILE_SIZE, TILE_SIZE, TILE_SIZE)

    def set_cell(self, x, y, cell):
        rect = self.tile_rect(x, y)
        pygame.draw.rect(self.screen, COLORS[Cell.EMPTY], rect)
        if cell == Cell.BALL:
            pygame.draw.circle(self.screen, COLORS[cell], rect.center, TILE_SIZE // 2)
        elif cell.is_block:
            # Shave the outer edge of each half so pairs read as one brick
            if x % 2 == 1:
                rect = rect.inflate(-1, -2).move(1, 0)
            else:
                rect = rect.inflate(-1, -2).move(-1, 0)
            pygame.draw.rect(self.screen, COLORS[cell], rect)
        elif cell != Cell.EMPTY:
            pygame.draw.rect(self.screen, COLORS[cell], rect)

    def clear_screen(self):
        self.screen.fill(COLORS[Cell.EMPTY])

    def draw_frame(self):
        field = pygame.Rect(
            GAP - 2, GAP - 2, TILE_SIZE * self.config.width + 4, TILE_SIZE * self.config.height + 4
        )
        pygame.draw.rect(self.screen, BORDER_COLOR, field, 2)

    def set_footer(self, field, value):
        self.footer[field] = value
        footer_top = GAP * 2 + TILE_SIZE * self.config.height
        pygame.draw.rect(
            self.screen,
            COLORS[Cell.EMPTY],
            (0, footer_top, self.screen_width, FOOTER_HEIGHT),
        )
        parts = [TITLE] + [
            LABELS[name] + FOOTER_FORMATS[name].format(self.footer[name])
            for name in ("lives", "level", "score")
        ]
        text = self.font.render("     ".join(parts), True, TEXT_COLOR)
        self.screen.blit(text, (GAP, footer_top))

    def show_message(self, lines):
        center_y = GAP + TILE_SIZE * self.config.height // 2
        line_height = self.font.get_linesize()
        top = center_y - line_height * len(lines) // 2
        for i, line in enumerate(lines):
            text = self.font.render(line, True, TEXT_COLOR, COLORS[Cell.EMPTY])
            text_rect = text.get_rect(center=(self.screen_width // 2, top + i * line_height))
            self.screen.blit(text, text_rect)

    def refresh(self):
        pygame.display.flip()


PYGAME_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.QUIT,
}


class PygameInput(InputSource):
    """Keyboard input from the pygame event queue."""

    def __init__(self):
        self.pending: list[Key] = []

    def _collect(self, event) -> Key | None:
        if event.type == pygame.QUIT:
            return Key.QUIT
        if event.type != pygame.KEYDOWN:
            return None
        if event.key in PYGAME_KEYS:
            return PYGAME_KEYS[event.key]
        return key_for_char(event.unicode) if event.unicode else None

    def poll_key(self):
        for event in pygame.event.get():
            key = self._collect(event)
            if key is not None:
                self.pending.append(key)
        if self.pending:
            return self.pending.pop(0)
        return None

    def wait_key(self):
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return Key.QUIT
            if event.type == pygame.KEYDOWN:
                return None

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from asciibreakout.game import board
from asciibreakout.game.board import LevelState, Session
from asciibreakout.game.cell import Cell
from asciibreakout.game.entities import Ball, Paddle
from asciibreakout.game.game_config import GameConfig, GameFactory
from asciibreakout.game.grid import Grid
from asciibreakout.game.keys import Key
from asciibreakout.game.paddle import center_paddle, move_paddle
from asciibreakout.game.physics import step_ball
from asciibreakout.game.random_source import RandomSource, SeededRandom
from asciibreakout.ui import messages
from asciibreakout.ui.surface import InputSource, NullInput, NullSurface, RenderSurface

logger = logging.getLogger(__name__)

# New lives pick step intervals in [MIN, MIN + SPREAD)
LAUNCH_STEP_MIN = 6
LAUNCH_STEP_SPREAD = 10
LAUNCH_Y_DIRECTION = 1


class Phase(Enum):
    LEVEL_START = "level_start"
    LIFE_START = "life_start"
    PLAYING = "playing"
    LIFE_LOST = "life_lost"
    LEVEL_CLEARED = "level_cleared"
    QUIT = "quit"
    GAME_OVER = "game_over"


@dataclass
class GameResult:
    score: int
    level: int
    lives: int
    quit: bool


def lives_bonus(level: int) -> int:
    """Extra lives handed out when ``level`` starts."""
    if level <= 1:
        return 0
    if level < 10:
        return 2
    if level < 20:
        return 1
    if level % 2 == 0 and level < 40:
        return 1
    if level % 4 == 0 and level < 60:
        return 1
    return 0


class Game:
    """Drives levels and lives and runs the frame loop.

    The grid, ball and paddle belong to the current level; ``session`` carries
    level number, score and lives from one level to the next. All drawing goes
    through ``surface`` and all keys come from ``keys``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
        surface: RenderSurface | None = None,
        keys: InputSource | None = None,
        start_level: int = 1,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if config is None:
            config = GameFactory.default()
        if start_level < 1:
            raise ValueError(f"Start level must be at least 1, got {start_level}")

        self.config = config
        self.rng = rng if rng is not None else SeededRandom()
        self.surface = surface if surface is not None else NullSurface()
        self.keys = keys if keys is not None else NullInput()
        self.sleep = sleep

        self.session = Session(level=start_level, lives=config.starting_lives)
        self.grid = Grid(config.width, config.height, listener=self.surface.set_cell)
        self.level_state = LevelState(max_block_y=0)
        self.paddle: Paddle | None = None
        self.ball: Ball | None = None
        self.frame = 0
        self.paused = False
        self.phase = Phase.LEVEL_START

    def start_level(self):
        level = self.session.level
        max_block_y = board.max_block_row(level, self.config.height)
        length = board.paddle_length(level)
        self.paddle = Paddle(
            x=(self.config.width - length) // 2,
            y=self.config.paddle_row,
            length=length,
            step_interval=self.config.paddle_step_interval,
        )
        self.ball = Ball(x=self.config.width // 2, y=(max_block_y + self.paddle.y) // 2)

        bonus = lives_bonus(level)
        self.session.lives += bonus

        blocks = board.generate_board(
            self.grid, level, max_block_y, self.paddle, self.ball, self.rng
        )
        self.level_state = LevelState(max_block_y=max_block_y, blocks_left=blocks)
        self.phase = Phase.LIFE_START
        logger.info(
            "Level %d: %d block pairs, paddle length %d, +%d lives",
            level, blocks, length, bonus,
        )

    def start_life(self):
        """Put ball and paddle back at their starting places and repaint."""
        ball = self.ball
        if self.grid.get(ball.x, ball.y) == Cell.BALL:
            self.grid.set(ball.x, ball.y, Cell.EMPTY)
        ball.x = self.config.width // 2
        ball.y = (self.level_state.max_block_y + self.paddle.y) // 2
        ball.x_step = self.rng.next_int(LAUNCH_STEP_SPREAD) + LAUNCH_STEP_MIN
        ball.y_step = self.rng.next_int(LAUNCH_STEP_SPREAD) + LAUNCH_STEP_MIN
        ball.x_direction = 1 if self.rng.next_bool() else -1
        ball.y_direction = LAUNCH_Y_DIRECTION
        self.grid.set(ball.x, ball.y, Cell.BALL)

        center_paddle(self.paddle, self.grid)
        self.frame = 0
        self.paused = False
        self.phase = Phase.PLAYING
        self.redraw()

    def redraw(self):
        self.surface.clear_screen()
        self.surface.draw_frame()
        self.surface.set_footer("lives", self.session.lives)
        self.surface.set_footer("level", self.session.level)
        self.surface.set_footer("score", self.session.score)
        for y in range(self.grid.height):
            for x in range(self.grid.width):
                self.surface.set_cell(x, y, self.grid.cells[y][x])
        self.surface.refresh()

    def handle_key(self, key: Key | None) -> bool:
        """Apply one key press. Returns False when the player asked to quit."""
        if key is None:
            return True
        if key is Key.QUIT:
            return False
        if key is Key.REDRAW:
            self.redraw()
        elif key is Key.PAUSE:
            self.paused = not self.paused
            if self.paused:
                self.surface.show_message(messages.paused())
            else:
                self.redraw()
        elif not self.paused and key is Key.LEFT:
            self.paddle.direction = -1
        elif not self.paused and key is Key.RIGHT:
            self.paddle.direction = 1
        return True

    def tick(self, key: Key | None = None) -> Phase:
        """Play one frame with ``key`` as the input for it."""
        self.frame += 1

        if not self.handle_key(key):
            self.phase = Phase.QUIT
            return self.phase
        if self.paused:
            return self.phase

        if self.paddle.direction != 0 and self.frame % self.paddle.step_interval == 0:
            move_paddle(self.paddle, self.grid)

        score_before = self.session.score
        in_play = step_ball(
            self.ball, self.grid, self.level_state, self.session, self.frame, self.rng
        )
        if self.session.score != score_before:
            self.surface.set_footer("score", self.session.score)
        self.surface.refresh()

        if not in_play:
            self.session.lives -= 1
            self.surface.set_footer("lives", self.session.lives)
            logger.info(
                "Ball lost on level %d at frame %d, %d lives left",
                self.session.level, self.frame, self.session.lives,
            )
            self.phase = Phase.LIFE_LOST
        elif self.level_state.blocks_left == 0:
            logger.info("Level %d cleared, score %d", self.session.level, self.session.score)
            self.phase = Phase.LEVEL_CLEARED
        return self.phase

    def advance_level(self):
        self.session.level += 1
        self.phase = Phase.LEVEL_START

    def play_level(self) -> Phase:
        """Play the current level until it is cleared, lives run out, or the player quits."""
        self.start_level()
        while self.session.lives > 0:
            self.start_life()
            self.surface.show_message(
                messages.life_start(self.session.level, self.session.lives)
            )
            self.surface.refresh()
            if self.keys.wait_key() is Key.QUIT:
                self.phase = Phase.QUIT
                return self.phase
            self.redraw()

            while True:
                self.sleep(self.config.frame_ms / 1000)
                phase = self.tick(self.keys.poll_key())
                if phase in (Phase.QUIT, Phase.LEVEL_CLEARED):
                    return phase
                if phase is Phase.LIFE_LOST:
                    break

        self.phase = Phase.GAME_OVER
        return self.phase

    def run(self) -> GameResult:
        while True:
            outcome = self.play_level()
            if outcome is not Phase.LEVEL_CLEARED:
                break
            self.surface.show_message(messages.level_complete(self.session.level))
            self.surface.refresh()
            if self.keys.wait_key() is Key.QUIT:
                outcome = self.phase = Phase.QUIT
                break
            self.advance_level()

        if outcome is Phase.GAME_OVER:
            logger.info(
                "Game over on level %d with score %d", self.session.level, self.session.score
            )
            self.surface.show_message(
                messages.game_over(self.session.score, self.session.level)
            )
            self.surface.refresh()
            self.keys.wait_key()
        else:
            logger.info("Player quit on level %d", self.session.level)

        return GameResult(
            score=self.session.score,
            level=self.session.level,
            lives=self.session.lives,
            quit=outcome is Phase.QUIT,
        )

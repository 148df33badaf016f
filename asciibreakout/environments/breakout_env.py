import logging

import numpy as np

from asciibreakout.game.cell import Cell
from asciibreakout.game.game import Game, Phase
from asciibreakout.game.game_config import GameConfig, GameFactory
from asciibreakout.game.keys import Key
from asciibreakout.game.random_source import SeededRandom

logger = logging.getLogger(__name__)

ACTIONS = (None, Key.LEFT, Key.RIGHT)


class BreakoutEnv:
    """OpenAI Gym-style environment around a headless Game.

    One step feeds one action to the game and then plays ``frame_skip``
    frames. Losing a life starts the next one right away and clearing a
    level moves on to the next level, so an episode only ends when the last
    life is gone or ``max_frames`` is reached.

    Args:
        config: Playfield configuration. Defaults to the 60x36 board.
        frame_skip: Frames played per step.
        life_penalty: Reward added when a life is lost.
        clear_reward: Reward added when a level is cleared.
        max_frames: Frame budget per episode, None for no limit.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        frame_skip: int = 4,
        life_penalty: float = -10.0,
        clear_reward: float = 50.0,
        max_frames: int | None = 200_000,
    ):
        if config is None:
            config = GameFactory.default()
        if frame_skip < 1:
            raise ValueError("frame_skip must be at least 1")

        self.config = config
        self.frame_skip = frame_skip
        self.life_penalty = life_penalty
        self.clear_reward = clear_reward
        self.max_frames = max_frames

        self.game: Game | None = None
        self.frames = 0
        self.done = False
        self.reset()

    @property
    def num_actions(self) -> int:
        return len(ACTIONS)

    def reset(self, seed: int | None = None, level: int = 1) -> np.ndarray:
        self.game = Game(self.config, rng=SeededRandom(seed), start_level=level, sleep=lambda _: None)
        self.game.start_level()
        self.game.start_life()
        self.frames = 0
        self.done = False
        return self.get_observation()

    def step(self, action: int) -> tuple[np.ndarray, float, bool, dict]:
        if self.done:
            raise RuntimeError("Episode done. Call reset()")
        if not 0 <= action < len(ACTIONS):
            raise ValueError(f"Invalid action {action}, must be in range 0 to {len(ACTIONS) - 1}")

        game = self.game
        prev_score = game.session.score
        reward = 0.0
        key = ACTIONS[action]
        if key is None:
            game.paddle.direction = 0

        for _ in range(self.frame_skip):
            phase = game.tick(key)
            key = None
            self.frames += 1

            if phase is Phase.LIFE_LOST:
                reward += self.life_penalty
                if game.session.lives > 0:
                    game.start_life()
                else:
                    self.done = True
                    break
            elif phase is Phase.LEVEL_CLEARED:
                reward += self.clear_reward
                game.advance_level()
                game.start_level()
                game.start_life()

            if self.max_frames is not None and self.frames >= self.max_frames:
                self.done = True
                break

        reward += game.session.score - prev_score
        if self.done:
            logger.debug(
                "Episode finished after %d frames: score %d, level %d",
                self.frames, game.session.score, game.session.level,
            )
        return self.get_observation(), float(reward), self.done, self.get_info()

    def get_info(self) -> dict:
        session = self.game.session
        return {
            "level": session.level,
            "lives": session.lives,
            "score": session.score,
            "blocks_left": self.game.level_state.blocks_left,
            "frames": self.frames,
        }

    def get_board(self) -> list[list[Cell]]:
        return self.game.grid.get_board()

    def get_observation(self) -> np.ndarray:
        return self._trainable_game(self.game.grid.to_array())

    def _trainable_game(self, board: np.ndarray) -> np.ndarray:
        """One-hot encode the board, one channel per Cell tag."""
        obs = np.zeros(self.config.observation_shape, dtype=np.float32)
        for cell in Cell:
            obs[int(cell)] = board == int(cell)
        return obs

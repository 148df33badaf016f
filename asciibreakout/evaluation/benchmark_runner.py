"""
Benchmark runner for bot evaluation.

Plays bots through BreakoutEnv over a fixed list of seeds so results are
comparable between bots and between runs.
"""

import logging
from typing import Any

from tqdm import tqdm

from asciibreakout.agents.benchmark_bot_base import BotBase
from asciibreakout.agents.random_bot import RandomBot
from asciibreakout.agents.tracking_bot import TrackingBot
from asciibreakout.environments.breakout_env import BreakoutEnv
from asciibreakout.evaluation.benchmark_data import BotPerformance
from asciibreakout.game.game_config import GameConfig, GameFactory

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Runs bots against a list of seeded games"""

    def __init__(
        self,
        config: GameConfig | None = None,
        num_games: int = 10,
        base_seed: int = 0,
        max_frames: int = 50_000,
        frame_skip: int = 4,
    ):
        self.config = config if config is not None else GameFactory.default()
        self.seeds = [base_seed + i for i in range(num_games)]
        self.max_frames = max_frames
        self.frame_skip = frame_skip
        self.available_bots = {
            "RandomBot": RandomBot,
            "TrackingBot": TrackingBot,
        }

    def run_bot_on_game(self, bot: BotBase, seed: int) -> BotPerformance:
        """Play one game to the end (or the frame budget) and record the outcome"""
        env = BreakoutEnv(
            self.config, frame_skip=self.frame_skip, max_frames=self.max_frames
        )
        env.reset(seed=seed)
        done = False
        info = env.get_info()

        while not done:
            action = bot.select_action(env.get_board())
            _, _, done, info = env.step(action)

        return BotPerformance(
            bot_name=bot.name,
            seed=seed,
            score=info["score"],
            level_reached=info["level"],
            lives_left=info["lives"],
            frames=info["frames"],
            finished=info["lives"] == 0,
        )

    def evaluate_bot(
        self, bot_name: str, bot_instance: BotBase | None = None
    ) -> list[BotPerformance]:
        """Evaluate a single bot against all seeds"""
        if bot_instance is None:
            if bot_name not in self.available_bots:
                raise ValueError(
                    f"Unknown bot: {bot_name}. Available: {list(self.available_bots.keys())}"
                )
            bot_instance = self.available_bots[bot_name]()

        logger.info("Evaluating %s against %d games", bot_name, len(self.seeds))
        return [
            self.run_bot_on_game(bot_instance, seed)
            for seed in tqdm(self.seeds, desc=f"Running {bot_name}")
        ]

    def run_full_benchmark(self) -> dict[str, list[BotPerformance]]:
        """Run all available bots"""
        return {name: self.evaluate_bot(name) for name in self.available_bots}


def summarize(results: list[BotPerformance]) -> dict[str, Any]:
    """Get summary statistics for one bot's results"""
    if not results:
        return {}

    return {
        "total_games": len(results),
        "avg_score": sum(r.score for r in results) / len(results),
        "best_score": max(r.score for r in results),
        "avg_level": sum(r.level_reached for r in results) / len(results),
        "avg_frames": sum(r.frames for r in results) / len(results),
        "finished_rate": sum(1 for r in results if r.finished) / len(results),
    }

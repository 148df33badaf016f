#!/usr/bin/env python3
"""
Benchmark entry point.

Runs the built-in bots headless and prints a ranking by average score.
"""

import argparse

from asciibreakout.evaluation.benchmark_runner import BenchmarkRunner, summarize
from asciibreakout.game.game_config import GameConfig


def benchmark_builtin_bots(
    config: GameConfig,
    num_games: int,
    base_seed: int = 0,
    max_frames: int = 50_000,
    verbose: bool = True,
) -> dict[str, dict[str, float]]:
    """
    Benchmark all built-in bots to get baseline performance.

    Args:
        config: Game configuration to use
        num_games: Number of seeded games per bot
        base_seed: Seed of the first game
        max_frames: Frame budget per game
        verbose: Whether to print the ranking
    """
    runner = BenchmarkRunner(
        config=config, num_games=num_games, base_seed=base_seed, max_frames=max_frames
    )
    comparison = {
        name: summarize(results) for name, results in runner.run_full_benchmark().items()
    }

    if verbose:
        print("\nPerformance Results:")
        print("-" * 30)
        ranked = sorted(comparison.items(), key=lambda x: x[1]["avg_score"], reverse=True)
        for i, (bot_name, stats) in enumerate(ranked, 1):
            print(f"{i}. {bot_name}")
            print(f"   Avg score: {stats['avg_score']:.1f} (best {stats['best_score']})")
            print(f"   Avg level reached: {stats['avg_level']:.2f}")
            print(f"   Avg frames survived: {stats['avg_frames']:.0f}")
            print(f"   Out of lives: {stats['finished_rate']:.1%}")
            print()

    return comparison


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the built-in Breakout bots")
    parser.add_argument("--games", type=int, default=10, help="games per bot")
    parser.add_argument("--seed", type=int, default=0, help="seed of the first game")
    parser.add_argument("--max-frames", type=int, default=50_000, help="frame budget per game")
    args = parser.parse_args(argv)

    if args.games < 1:
        parser.error("--games must be at least 1")

    benchmark_builtin_bots(
        GameConfig.from_env(), args.games, base_seed=args.seed, max_frames=args.max_frames
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

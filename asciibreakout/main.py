"""Command line entry point: ``asciibreakout [LEVEL]``."""

import argparse
import curses
import logging

from asciibreakout.game.game import Game, GameResult
from asciibreakout.game.game_config import GameConfig
from asciibreakout.game.random_source import SeededRandom
from asciibreakout.ui import messages

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"level must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciibreakout", description="A terminal Breakout game."
    )
    parser.add_argument(
        "level", nargs="?", type=positive_int, default=1, help="level to start on (default 1)"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for board and ball randomness")
    parser.add_argument(
        "--window", action="store_true", help="play in a pygame window instead of the terminal"
    )
    parser.add_argument("--log-file", default=None, help="write debug logs to this file")
    return parser


def setup_logging(log_file: str | None):
    if log_file is None:
        # Anything printed to stderr would land on top of the curses screen
        logging.basicConfig(handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def play_terminal(config: GameConfig, level: int, seed: int | None) -> GameResult:
    from asciibreakout.ui.terminal import CursesInput, CursesSurface

    def session(screen) -> GameResult:
        game = Game(
            config,
            rng=SeededRandom(seed),
            surface=CursesSurface(screen, config),
            keys=CursesInput(screen),
            start_level=level,
        )
        return game.run()

    # curses.wrapper restores the terminal on any exit, including Ctrl-C
    return curses.wrapper(session)


def play_window(config: GameConfig, level: int, seed: int | None) -> GameResult:
    import pygame

    from asciibreakout.ui.View import PygameInput, View

    try:
        game = Game(
            config,
            rng=SeededRandom(seed),
            surface=View(config),
            keys=PygameInput(),
            start_level=level,
        )
        return game.run()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file)

    try:
        config = GameConfig.from_env()
    except ValueError as e:
        parser.error(str(e))

    logger.info("Starting on level %d (seed %s)", args.level, args.seed)
    try:
        if args.window:
            result = play_window(config, args.level, args.seed)
        else:
            result = play_terminal(config, args.level, args.seed)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    for line in messages.game_over(result.score, result.level)[:-1]:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

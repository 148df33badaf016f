"""Text shown between lives and levels, as ready-to-draw lines."""

from asciibreakout.game.game_params import TITLE

CONTINUE = "Press any key to continue"


def life_start(level: int, lives: int) -> list[str]:
    lines = [f"Level: {level}", f"Lives remaining: {lives}", CONTINUE]
    if level == 1:
        return [TITLE, "Press j and k to move the paddle", "p pauses, q quits"] + lines
    return lines


def level_complete(level: int) -> list[str]:
    return [f"Level {level} complete!", CONTINUE + "..."]


def paused() -> list[str]:
    return ["Paused", "Press p to resume"]


def game_over(score: int, level: int) -> list[str]:
    return ["Game over!", f"Score: {score}", f"Level: {level}", "Press any key to quit."]

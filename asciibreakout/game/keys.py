from enum import Enum


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    REDRAW = "redraw"
    PAUSE = "pause"


KEY_BINDINGS = {
    "j": Key.LEFT,
    "J": Key.LEFT,
    "k": Key.RIGHT,
    "K": Key.RIGHT,
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "r": Key.REDRAW,
    "R": Key.REDRAW,
    "p": Key.PAUSE,
    "P": Key.PAUSE,
}


def key_for_char(char: str) -> Key | None:
    """Map a typed character to a game key; anything unbound maps to None."""
    return KEY_BINDINGS.get(char)

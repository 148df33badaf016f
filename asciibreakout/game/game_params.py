# Display constants shared by the front ends.
# The simulation only knows Cell tags; how each tag is drawn lives here.
from asciibreakout.game.cell import Cell

TITLE = "ASCII BREAKOUT"
LIVES_FOOTER = "<3:"
LEVEL_FOOTER = "Level:"
SCORE_FOOTER = "Score:"
FOOTER_GAP = 5
FOOTER_X = 4

FOOTER_FORMATS = {
    "lives": "{:02d}",
    "level": "{:02d}",
    "score": "{:08d}",
}

BALL_GLYPH = "O"
BLOCK_GLYPHS = ("(", ")")  # left and right half of a block pair

# pygame view
COLORS = {
    Cell.EMPTY: (0, 0, 0),
    Cell.BALL: (255, 255, 255),
    Cell.PADDLE: (181, 11, 181),  # Magenta
    Cell.RED_BLOCK: (252, 15, 15),
    Cell.BLUE_BLOCK: (11, 51, 181),
    Cell.GREEN_BLOCK: (17, 181, 11),
}
BORDER_COLOR = (17, 181, 11)
TEXT_COLOR = (255, 255, 255)

TILE_SIZE = 14
GAP = 20
FOOTER_HEIGHT = 40

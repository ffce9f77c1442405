GRID_WIDTH = 3
GRID_HEIGHT = 3

# Smallest board edge accepted at construction. A 1x1 board can never be left
# unsolved by an even-sized press batch, so the scramble loop would not terminate.
MIN_BOARD_SIZE = 2

# Presses applied per scramble batch.
SCRAMBLE_ITERATIONS = 100
# Upper bound on rejected batches before the scrambler gives up.
SCRAMBLE_MAX_ATTEMPTS = 1000

# Text glyphs used by hosts that draw the grid as characters.
LIT_GLYPH = "-*-"
UNLIT_GLYPH = "   "
SOLVED_SUFFIX = " Solved!"

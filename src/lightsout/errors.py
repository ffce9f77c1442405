"""Exceptions raised by the puzzle engine."""


class CoordinateOutOfRange(IndexError):
    """A cell coordinate outside the board was addressed."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Cell ({x}, {y}) is outside the {width}x{height} board")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class BoardConfigurationError(ValueError):
    """Board dimensions for which no unsolved scramble exists."""


class ScrambleExhausted(RuntimeError):
    """Every scramble attempt left the board solved."""

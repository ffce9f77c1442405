from dataclasses import dataclass


@dataclass(slots=True)
class Board:
    width: int
    height: int
    # Player presses since the puzzle was last scrambled.
    move_count: int = 0

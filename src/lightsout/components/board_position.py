from dataclasses import dataclass


@dataclass(slots=True)
class BoardPosition:
    x: int
    y: int

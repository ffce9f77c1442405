from dataclasses import dataclass


@dataclass(slots=True)
class Light:
    """Per-cell lamp state. ``True`` means lit."""
    lit: bool = True

    def flip(self) -> bool:
        self.lit = not self.lit
        return self.lit

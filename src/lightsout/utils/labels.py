from __future__ import annotations

from typing import TYPE_CHECKING, List

from lightsout.constants import LIT_GLYPH, SOLVED_SUFFIX, UNLIT_GLYPH

if TYPE_CHECKING:
    from lightsout.systems.board import BoardSystem


def cell_glyph(lit: bool) -> str:
    return LIT_GLYPH if lit else UNLIT_GLYPH


def moves_text(move_count: int, solved: bool) -> str:
    """Counter label shown under the grid, e.g. ``"7"`` or ``"7 Solved!"``."""
    text = f"{move_count}"
    if solved:
        text += SOLVED_SUFFIX
    return text


def board_rows(board: "BoardSystem") -> List[str]:
    """Render the grid as one string per row, ``y`` increasing downwards."""
    return [
        "".join(cell_glyph(board.get(x, y)) for x in range(board.width))
        for y in range(board.height)
    ]

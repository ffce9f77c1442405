from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from esper import World

from lightsout.components.board import Board
from lightsout.components.board_position import BoardPosition
from lightsout.components.light import Light

Position = Tuple[int, int]

# Offsets of the "plus" toggled by a press, centre first.
PRESS_OFFSETS: Tuple[Position, ...] = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def iter_coordinates(width: int, height: int) -> Iterator[Position]:
    """Yield every ``(x, y)`` of a ``width`` x ``height`` grid, column by column."""
    for x in range(width):
        for y in range(height):
            yield (x, y)


def press_pattern(x: int, y: int, width: int, height: int) -> List[Position]:
    """Cells flipped by pressing ``(x, y)``: the cell plus its orthogonal neighbours.

    Neighbours that fall off the grid are dropped; there is no wraparound.
    """
    pattern: List[Position] = []
    for dx, dy in PRESS_OFFSETS:
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny, width, height):
            pattern.append((nx, ny))
    return pattern


def get_entity_at(world: World, x: int, y: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.x == x and position.y == y:
            return entity
    return None


def light_map(world: World) -> Dict[Position, bool]:
    """Return mapping of cell positions to their lit state."""
    mapping: Dict[Position, bool] = {}
    for entity, (position, light) in world.get_components(BoardPosition, Light):
        mapping[(position.x, position.y)] = light.lit
    return mapping


def all_lit(world: World) -> bool:
    for _, light in world.get_component(Light):
        if not light.lit:
            return False
    return True

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional

from esper import World

from lightsout.components.board import Board
from lightsout.components.board_position import BoardPosition
from lightsout.components.light import Light
from lightsout.constants import GRID_HEIGHT, GRID_WIDTH, MIN_BOARD_SIZE
from lightsout.errors import BoardConfigurationError, CoordinateOutOfRange
from lightsout.events.bus import (
    EventBus,
    EVENT_BOARD_SOLVED,
    EVENT_CELL_CLICK,
    EVENT_CELL_PRESSED,
    EVENT_MOVE_COUNT_CHANGED,
    EVENT_RESET_REQUEST,
)
from lightsout.systems.board_ops import Position, in_bounds, iter_coordinates, press_pattern
from lightsout.systems.scramble import ScrambleGenerator, ScrambleResult


class BoardSystem:
    """Owns the light grid and applies the press rule.

    The board starts fully lit with a zero move counter. ``press`` is the
    player move; ``flip_pattern`` is the same toggle without counting and is
    what scrambling uses. Out-of-range coordinates raise
    :class:`CoordinateOutOfRange` rather than being clamped.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        *,
        scrambler: Optional[ScrambleGenerator] = None,
    ):
        _validate_dimensions(width, height)
        self.world = world
        self.event_bus = event_bus
        self.scrambler = scrambler or ScrambleGenerator(rng=getattr(world, "random", None))
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(width=width, height=height))
        self._cells: Dict[Position, int] = {}
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)
        self._init_board()

    def _init_board(self):
        for x, y in self.coordinates():
            ent = self.world.create_entity(BoardPosition(x=x, y=y), Light(lit=True))
            self._cells[(x, y)] = ent

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def move_count(self) -> int:
        return self.board.move_count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def coordinates(self) -> Iterator[Position]:
        board = self.board
        return iter_coordinates(board.width, board.height)

    def visit(self, visitor: Callable[[int, int, "BoardSystem"], None]) -> None:
        for x, y in self.coordinates():
            visitor(x, y, self)

    def get(self, x: int, y: int) -> bool:
        return self._light_at(x, y).lit

    def cells(self) -> Dict[Position, bool]:
        return {pos: self.world.component_for_entity(ent, Light).lit for pos, ent in self._cells.items()}

    def solved(self) -> bool:
        for ent in self._cells.values():
            if not self.world.component_for_entity(ent, Light).lit:
                return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def toggle(self, x: int, y: int) -> bool:
        return self._light_at(x, y).flip()

    def flip_pattern(self, x: int, y: int) -> List[Position]:
        """Toggle ``(x, y)`` and its orthogonal neighbours without counting a move."""
        board = self.board
        self._check_bounds(x, y)
        toggled = press_pattern(x, y, board.width, board.height)
        for cx, cy in toggled:
            self.toggle(cx, cy)
        return toggled

    def press(self, x: int, y: int) -> List[Position]:
        """Player move: count it, then flip the plus around ``(x, y)``.

        The move is counted even if the board is already solved; refusing
        moves on a finished puzzle is left to whoever dispatches input.
        """
        self._check_bounds(x, y)
        board = self.board
        board.move_count += 1
        toggled = self.flip_pattern(x, y)
        self.event_bus.emit(EVENT_CELL_PRESSED, x=x, y=y, move_count=board.move_count, toggled=toggled)
        self.event_bus.emit(EVENT_MOVE_COUNT_CHANGED, move_count=board.move_count)
        if self.solved():
            self.event_bus.emit(EVENT_BOARD_SOLVED, move_count=board.move_count)
        return toggled

    def reset(self) -> ScrambleResult:
        """Scramble in place and zero the move counter."""
        return self.scrambler.scramble(self)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_cell_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        # A finished puzzle ignores further clicks until it is reset.
        if self.solved():
            return
        self.press(x, y)

    def on_reset_request(self, sender, **kwargs):
        self.reset()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _check_bounds(self, x: int, y: int) -> None:
        board = self.board
        if not in_bounds(x, y, board.width, board.height):
            raise CoordinateOutOfRange(x, y, board.width, board.height)

    def _light_at(self, x: int, y: int) -> Light:
        self._check_bounds(x, y)
        return self.world.component_for_entity(self._cells[(x, y)], Light)


def _validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise BoardConfigurationError(f"Board {name} must be an integer, got {value!r}")
        if value < MIN_BOARD_SIZE:
            raise BoardConfigurationError(
                f"Board {name} must be at least {MIN_BOARD_SIZE}, got {value}"
            )

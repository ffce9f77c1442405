from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from lightsout.constants import SCRAMBLE_ITERATIONS, SCRAMBLE_MAX_ATTEMPTS
from lightsout.errors import ScrambleExhausted
from lightsout.events.bus import EVENT_BOARD_SCRAMBLED, EVENT_MOVE_COUNT_CHANGED

if TYPE_CHECKING:
    from lightsout.systems.board import BoardSystem

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(slots=True)
class ScrambleResult:
    attempts: int
    # Presses of the accepted batch, in the order they were applied.
    presses: List[Position] = field(default_factory=list)


class ScrambleGenerator:
    """Drives a board through random presses until it is left unsolved.

    Each attempt applies ``iterations`` presses at uniformly drawn coordinates.
    A batch that happens to land back on the solved board is rejected and a
    fresh batch is applied from that (solved) state. Boards too small to ever
    end unsolved are refused by ``BoardSystem`` itself; ``max_attempts`` bounds
    the loop for anything else and raises :class:`ScrambleExhausted`.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        iterations: int = SCRAMBLE_ITERATIONS,
        max_attempts: int = SCRAMBLE_MAX_ATTEMPTS,
    ) -> None:
        if iterations < 1:
            raise ValueError(f"iterations must be positive, got {iterations}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.random = rng or random.Random()
        self.iterations = iterations
        self.max_attempts = max_attempts

    def random_batch(self, width: int, height: int) -> List[Position]:
        return [
            (self.random.randrange(width), self.random.randrange(height))
            for _ in range(self.iterations)
        ]

    def scramble(self, board: "BoardSystem") -> ScrambleResult:
        width, height = board.width, board.height
        for attempt in range(1, self.max_attempts + 1):
            presses = self.random_batch(width, height)
            for x, y in presses:
                board.flip_pattern(x, y)
            if board.solved():
                logger.debug("Scramble attempt %d left the %dx%d board solved; retrying", attempt, width, height)
                continue
            board.board.move_count = 0
            board.event_bus.emit(EVENT_BOARD_SCRAMBLED, attempts=attempt, presses=list(presses))
            board.event_bus.emit(EVENT_MOVE_COUNT_CHANGED, move_count=0)
            return ScrambleResult(attempts=attempt, presses=presses)

        logger.warning("Gave up scrambling %dx%d board after %d attempts", width, height, self.max_attempts)
        raise ScrambleExhausted(
            f"Unable to scramble {width}x{height} board after {self.max_attempts} attempts"
        )

import random

import pytest

from lightsout.errors import ScrambleExhausted
from lightsout.events.bus import (
    EventBus,
    EVENT_BOARD_SCRAMBLED,
    EVENT_CELL_PRESSED,
    EVENT_MOVE_COUNT_CHANGED,
    EVENT_RESET_REQUEST,
)
from lightsout.systems.board import BoardSystem
from lightsout.systems.scramble import ScrambleGenerator
from lightsout.world import create_world


class FixedRandom(random.Random):
    """Always draws the lowest value, so every press hits (0, 0)."""

    def randrange(self, *args, **kwargs):
        return 0


def make_board(width=3, height=3, seed=1234, **scramble_kwargs):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    scrambler = ScrambleGenerator(rng=getattr(world, "random"), **scramble_kwargs) if scramble_kwargs else None
    return BoardSystem(world, bus, width, height, scrambler=scrambler), bus


@pytest.mark.parametrize("width,height", [(2, 2), (3, 3), (2, 3), (5, 5), (4, 7)])
def test_reset_leaves_board_unsolved_with_zero_moves(width, height):
    board, _ = make_board(width, height)
    board.press(0, 0)
    board.reset()
    assert not board.solved()
    assert board.move_count == 0


def test_reset_repeatedly_with_many_seeds():
    for seed in range(25):
        board, _ = make_board(2, 2, seed=seed)
        result = board.reset()
        assert not board.solved()
        assert board.move_count == 0
        assert result.attempts >= 1
        assert len(result.presses) == 100


def test_scramble_presses_stay_in_bounds():
    board, _ = make_board(4, 2)
    result = board.reset()
    assert all(0 <= x < 4 and 0 <= y < 2 for x, y in result.presses)


def test_replaying_accepted_batch_resolves_board():
    board, _ = make_board(3, 3, seed=99)
    result = board.reset()
    assert not board.solved()
    for x, y in result.presses:
        board.press(x, y)
    assert board.solved()
    assert board.move_count == len(result.presses)


def test_replaying_batch_in_any_order_resolves_board():
    board, _ = make_board(3, 3, seed=7)
    result = board.reset()
    shuffled = list(result.presses)
    random.Random(3).shuffle(shuffled)
    for x, y in shuffled:
        board.flip_pattern(x, y)
    assert board.solved()


def test_seeded_scrambles_are_reproducible():
    first, _ = make_board(4, 4, seed=42)
    second, _ = make_board(4, 4, seed=42)
    assert first.reset().presses == second.reset().presses
    assert first.cells() == second.cells()


def test_solved_batches_are_rejected_and_retried():
    # Two presses on the same cell always cancel out; a board pressed only at
    # (0, 0) can never leave the solved state.
    bus = EventBus()
    world = create_world(bus)
    scrambler = ScrambleGenerator(rng=FixedRandom(), iterations=2, max_attempts=5)
    board = BoardSystem(world, bus, 3, 3, scrambler=scrambler)
    with pytest.raises(ScrambleExhausted):
        board.reset()
    assert board.solved()


def test_odd_batch_with_fixed_draws_succeeds_first_time():
    bus = EventBus()
    world = create_world(bus)
    scrambler = ScrambleGenerator(rng=FixedRandom(), iterations=3, max_attempts=5)
    board = BoardSystem(world, bus, 3, 3, scrambler=scrambler)
    result = board.reset()
    assert result.attempts == 1
    assert result.presses == [(0, 0)] * 3
    unlit = {pos for pos, lit in board.cells().items() if not lit}
    assert unlit == {(0, 0), (1, 0), (0, 1)}


@pytest.mark.parametrize("kwargs", [{"iterations": 0}, {"max_attempts": 0}, {"iterations": -5}])
def test_scrambler_rejects_non_positive_budgets(kwargs):
    with pytest.raises(ValueError):
        ScrambleGenerator(**kwargs)


def test_scramble_emits_events_but_no_player_presses():
    board, bus = make_board(3, 3)
    scrambled: list[dict] = []
    pressed: list[dict] = []
    counts: list[int] = []
    bus.subscribe(EVENT_BOARD_SCRAMBLED, lambda sender, **payload: scrambled.append(payload))
    bus.subscribe(EVENT_CELL_PRESSED, lambda sender, **payload: pressed.append(payload))
    bus.subscribe(EVENT_MOVE_COUNT_CHANGED, lambda sender, **payload: counts.append(payload["move_count"]))

    result = board.reset()
    assert pressed == []
    assert len(scrambled) == 1
    assert scrambled[0]["attempts"] == result.attempts
    assert scrambled[0]["presses"] == result.presses
    assert counts == [0]


def test_reset_request_event_scrambles_board():
    board, bus = make_board(3, 3)
    board.toggle(0, 0)
    board.press(1, 1)
    bus.emit(EVENT_RESET_REQUEST)
    assert board.move_count == 0
    assert not board.solved()


def test_board_uses_world_random_by_default():
    bus = EventBus()
    world = create_world(bus, rng=random.Random(5))
    board = BoardSystem(world, bus, 3, 3)
    assert board.scrambler.random is getattr(world, "random")

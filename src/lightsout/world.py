import random

from esper import World
from .events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create an empty puzzle world.

    The world owns the random source shared by systems that need one; pass a
    seeded ``random.Random`` for reproducible scrambles. The bus is kept as
    ``world.event_bus``.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)
    return world

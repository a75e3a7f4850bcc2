import random

from esper import World

from shellgame.components.debug_overlay import DebugOverlay
from shellgame.components.game_session import GameSession
from shellgame.components.swap_queue import SwapQueue
from shellgame.config import GameSettings
from shellgame.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
    settings: GameSettings | None = None,
) -> World:
    """Create the ECS world with the singleton session entity.

    Cups are spawned by the state machine when it sets up the first round.
    """
    settings = settings or GameSettings()
    world = World()
    if rng is None:
        rng = random.Random(settings.seed) if settings.seed is not None else random.Random()
    setattr(world, "random", rng)
    setattr(world, "settings", settings)
    setattr(world, "event_bus", event_bus)

    world.create_entity(
        GameSession(),
        SwapQueue(),
        DebugOverlay(enabled=settings.debug),
    )
    return world

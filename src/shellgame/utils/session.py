from __future__ import annotations

from esper import World

from shellgame.components.cup import Cup
from shellgame.components.debug_overlay import DebugOverlay
from shellgame.components.game_session import GameSession
from shellgame.components.swap_queue import SwapQueue


def get_session(world: World) -> GameSession | None:
    for _, session in world.get_component(GameSession):
        return session
    return None


def get_swap_queue(world: World) -> SwapQueue | None:
    for _, queue in world.get_component(SwapQueue):
        return queue
    return None


def debug_enabled(world: World) -> bool:
    for _, overlay in world.get_component(DebugOverlay):
        return overlay.enabled
    return False


def get_cups(world: World) -> list[Cup]:
    """Cups ordered by identity, which is also the arrangement order."""
    return sorted((cup for _, cup in world.get_component(Cup)), key=lambda cup: cup.index)

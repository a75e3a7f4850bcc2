from __future__ import annotations

from esper import World

from shellgame.components.cup import Cup
from shellgame.constants import CUP_RADIUS
from shellgame.ui.layout import layout_slots


def clear_cups(world: World) -> None:
    for ent in [ent for ent, _ in world.get_component(Cup)]:
        world.delete_entity(ent, immediate=True)


def spawn_cups(world: World, cup_count: int, *, radius: float = CUP_RADIUS) -> list[int]:
    """Replace any existing cups with ``cup_count`` fresh cups on their layout slots.

    Cup ``i`` starts on slot ``i``.
    """
    clear_cups(world)
    ents = []
    for index, slot in enumerate(layout_slots(cup_count)):
        ents.append(world.create_entity(Cup(index=index, home_slot=slot, position=slot, radius=radius)))
    return ents

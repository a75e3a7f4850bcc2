import logging

from esper import World

from shellgame.components.debug_overlay import DebugOverlay
from shellgame.events.bus import EVENT_DEBUG_CHANGED, EVENT_DEBUG_TOGGLE, EventBus

logger = logging.getLogger("shellgame.debug")


class DebugSystem:
    """Flips the debug overlay flag; game logic never reads it."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_DEBUG_TOGGLE, self.on_toggle)

    def on_toggle(self, sender, **kwargs):
        overlay = None
        for _, comp in self.world.get_component(DebugOverlay):
            overlay = comp
            break
        if overlay is None:
            overlay = DebugOverlay()
            self.world.create_entity(overlay)
        overlay.enabled = not overlay.enabled
        logger.info("Cup numbers %s", "ON" if overlay.enabled else "OFF")
        self.event_bus.emit(EVENT_DEBUG_CHANGED, enabled=overlay.enabled)

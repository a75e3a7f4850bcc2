from __future__ import annotations

import logging

from esper import World

from shellgame.components.distraction_effect import DistractionEffect
from shellgame.constants import DISTRACTION_INTERVAL
from shellgame.events.bus import (
    EVENT_DISTRACTION_TOGGLED,
    EVENT_SESSION_RESET,
    EVENT_SHUFFLE_CANCEL,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_SHUFFLE_START,
    EVENT_TICK,
    EventBus,
)

logger = logging.getLogger("shellgame.distraction")


class DistractionSystem:
    """Flashes the table while cups mix on stages that ask for it.

    The effect lives exactly as long as the shuffle: every way a shuffle can
    end (completion, cancellation, session reset) stops it.
    """

    def __init__(self, world: World, event_bus: EventBus, *, interval: float = DISTRACTION_INTERVAL) -> None:
        self.world = world
        self.event_bus = event_bus
        self.interval = interval
        event_bus.subscribe(EVENT_SHUFFLE_START, self._on_shuffle_start)
        event_bus.subscribe(EVENT_SHUFFLE_COMPLETE, self._on_shuffle_end)
        event_bus.subscribe(EVENT_SHUFFLE_CANCEL, self._on_shuffle_end)
        event_bus.subscribe(EVENT_SESSION_RESET, self._on_shuffle_end)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _on_shuffle_start(self, sender, **payload) -> None:
        config = payload.get("config")
        if config is not None and config.distraction_effect:
            self.start()

    def _on_shuffle_end(self, sender, **payload) -> None:
        self.stop()

    def start(self) -> None:
        if self.effect is not None:
            return
        self.world.create_entity(DistractionEffect(interval=self.interval))
        logger.debug("Distraction effect started")

    def stop(self) -> None:
        ents = [ent for ent, _ in self.world.get_component(DistractionEffect)]
        for ent in ents:
            self.world.delete_entity(ent, immediate=True)
        if ents:
            self.event_bus.emit(EVENT_DISTRACTION_TOGGLED, flash_on=False)
            logger.debug("Distraction effect stopped")

    @property
    def effect(self) -> DistractionEffect | None:
        for _, effect in self.world.get_component(DistractionEffect):
            return effect
        return None

    def on_tick(self, sender, **kwargs) -> None:
        effect = self.effect
        if effect is None or effect.interval <= 0.0:
            return
        effect.elapsed += kwargs.get("dt", 1 / 60)
        while effect.elapsed >= effect.interval:
            effect.elapsed -= effect.interval
            effect.flash_on = not effect.flash_on
            effect.toggles += 1
            self.event_bus.emit(EVENT_DISTRACTION_TOGGLED, flash_on=effect.flash_on)

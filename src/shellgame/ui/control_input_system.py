"""Input handling for the control bar and keyboard shortcuts."""
from __future__ import annotations

from esper import World

from shellgame.events.bus import (
    EVENT_CHOICE_GO,
    EVENT_CHOICE_STOP,
    EVENT_DEBUG_TOGGLE,
    EVENT_GIVE_UP_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_PHASE_CHANGED,
    EVENT_RESET_REQUEST,
    EVENT_START_REQUEST,
    EventBus,
)
from shellgame.ui.components import ControlAction, ControlButton
from shellgame.ui.factory import refresh_controls, spawn_controls
from shellgame.utils.session import get_session

_ACTION_EVENTS = {
    ControlAction.START: EVENT_START_REQUEST,
    ControlAction.RESET: EVENT_RESET_REQUEST,
    ControlAction.GO: EVENT_CHOICE_GO,
    ControlAction.STOP: EVENT_CHOICE_STOP,
    ControlAction.GIVE_UP: EVENT_GIVE_UP_REQUEST,
}

# pyglet key codes, kept literal so this module does not import arcade.
KEY_SPACE = 32
KEY_G = 103
KEY_M = 109
KEY_Q = 113
KEY_R = 114
KEY_S = 115
MOD_ALT = 4

_KEY_ACTIONS = {
    KEY_SPACE: ControlAction.START,
    KEY_R: ControlAction.RESET,
    KEY_G: ControlAction.GO,
    KEY_S: ControlAction.STOP,
    KEY_Q: ControlAction.GIVE_UP,
}


class ControlInputSystem:
    """Maps button clicks and key presses to command events."""

    def __init__(self, world: World, event_bus: EventBus, *, transition_pending=None) -> None:
        self.world = world
        self.event_bus = event_bus
        # Optional callable reporting whether a delayed transition is pending.
        self._transition_pending = transition_pending
        spawn_controls(world)
        self.refresh()
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_PHASE_CHANGED, self._on_phase_changed)

    def refresh(self) -> None:
        session = get_session(self.world)
        if session is None:
            return
        pending = bool(self._transition_pending()) if self._transition_pending else False
        refresh_controls(self.world, session, transition_pending=pending)

    def _on_phase_changed(self, sender, **payload) -> None:
        self.refresh()

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button", 1)
        if x is None or y is None or button != 1:
            return
        self.handle_mouse_press(float(x), float(y))

    def handle_mouse_press(self, x: float, y: float) -> ControlAction | None:
        for _, button in self.world.get_component(ControlButton):
            if not button.visible or not button.enabled:
                continue
            if button.contains(x, y):
                self._activate(button.action)
                return button.action
        return None

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == KEY_M and modifiers & MOD_ALT:
            self.event_bus.emit(EVENT_DEBUG_TOGGLE)
            return
        action = _KEY_ACTIONS.get(symbol)
        if action is not None:
            self._activate(action)

    def _activate(self, action: ControlAction) -> None:
        self.event_bus.emit(_ACTION_EVENTS[action])
        # Commands that are ignored leave the phase unchanged; keep labels current anyway.
        self.refresh()

from esper import World

from shellgame.components.game_session import GamePhase
from shellgame.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_CUP_SELECTED
from shellgame.utils.session import get_cups, get_session


class InputSystem:
    """Turns pointer presses on the table into cup selections."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', 1)
        if x is None or y is None:
            return
        # Only the left button selects cups.
        if button != 1:
            return
        self.on_pointer_down(float(x), float(y))

    def on_pointer_down(self, x: float, y: float) -> int | None:
        """Hit-test cups at their current positions; returns the selected cup index, if any."""
        session = get_session(self.world)
        if session is None or session.phase != GamePhase.SELECTING:
            return None
        for cup in get_cups(self.world):
            if cup.contains(x, y):
                self.event_bus.emit(EVENT_CUP_SELECTED, cup_index=cup.index)
                return cup.index
        return None

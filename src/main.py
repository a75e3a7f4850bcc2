"""Entry point for the shell game.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from dotenv import load_dotenv

from shellgame.config import GameSettings, load_settings
from shellgame.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from shellgame.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from shellgame.rendering.render_system import RenderSystem
from shellgame.systems.debug_system import DebugSystem
from shellgame.systems.distraction_system import DistractionSystem
from shellgame.systems.game_state_machine import GameStateMachine
from shellgame.systems.input import InputSystem
from shellgame.systems.shuffle_scheduler import ShuffleScheduler
from shellgame.ui.control_input_system import ControlInputSystem
from shellgame.world import create_world


class ShellGameWindow(Window):
    def __init__(self, settings: GameSettings):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(settings.tick_rate)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, settings=settings)

        # Core systems
        self.shuffle_scheduler = ShuffleScheduler(self.world, self.event_bus)
        self.distraction_system = DistractionSystem(self.world, self.event_bus)
        self.game_state_machine = GameStateMachine(self.world, self.event_bus, settings=settings)

        # Interface systems
        self.debug_system = DebugSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.world, self.event_bus)
        self.control_input_system = ControlInputSystem(
            self.world,
            self.event_bus,
            transition_pending=lambda: self.game_state_machine.transition_pending,
        )
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        # Arcade y grows upward; the model's grows downward.
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=self.height - y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.control_input_system.handle_key_press(symbol, modifiers)


def main():
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ShellGameWindow(settings)
    run()


if __name__ == "__main__":
    main()

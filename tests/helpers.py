from __future__ import annotations

import random
from types import SimpleNamespace

from shellgame.components.game_session import GamePhase
from shellgame.config import GameSettings
from shellgame.events.bus import EVENT_TICK, EventBus
from shellgame.systems.distraction_system import DistractionSystem
from shellgame.systems.game_state_machine import GameStateMachine
from shellgame.systems.shuffle_scheduler import ShuffleScheduler
from shellgame.utils.session import get_session
from shellgame.world import create_world

TICK = 1 / 60


def build_game(seed: int = 0, settings: GameSettings | None = None) -> SimpleNamespace:
    """Wire the core systems the same way the window does, minus rendering."""
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed), settings=settings)
    scheduler = ShuffleScheduler(world, bus)
    distraction = DistractionSystem(world, bus)
    machine = GameStateMachine(world, bus)
    return SimpleNamespace(
        bus=bus,
        world=world,
        scheduler=scheduler,
        distraction=distraction,
        machine=machine,
        session=get_session(world),
    )


def drive_ticks(bus: EventBus, count: int = 60, dt: float = TICK) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def run_shuffle(game, max_ticks: int = 10_000) -> int:
    """Start the round and tick until the cups can be picked. Returns ticks used."""
    assert game.machine.start()
    for tick in range(1, max_ticks + 1):
        game.bus.emit(EVENT_TICK, dt=TICK)
        if game.session.phase == GamePhase.SELECTING:
            return tick
    raise AssertionError("Shuffle never completed")


def settle(game, max_ticks: int = 10_000, dt: float = 0.05) -> None:
    """Tick until no delayed transition is pending."""
    for _ in range(max_ticks):
        if not game.machine.transition_pending:
            return
        game.bus.emit(EVENT_TICK, dt=dt)
    raise AssertionError("Transitions never settled")


def wrong_cup(game) -> int:
    return (game.session.ball_cup_index + 1) % game.machine.config.cup_count


def play_round(game, *, correct: bool) -> None:
    run_shuffle(game)
    pick = game.session.ball_cup_index if correct else wrong_cup(game)
    assert game.machine.select(pick)
    settle(game)


def advance_to_stage(game, stage: int) -> None:
    """Clear stages and press GO until ``stage`` is reached."""
    while game.session.stage < stage:
        play_round(game, correct=True)
        assert game.session.phase == GamePhase.CHOICE
        assert game.machine.choose_go()

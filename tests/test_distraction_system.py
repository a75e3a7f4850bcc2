from shellgame.components.distraction_effect import DistractionEffect
from shellgame.events.bus import (
    EVENT_DISTRACTION_TOGGLED,
    EVENT_SHUFFLE_CANCEL,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_SHUFFLE_START,
    EVENT_TICK,
    EventBus,
)
from shellgame.factories.stages import get_stage_config
from shellgame.systems.distraction_system import DistractionSystem
from shellgame.world import create_world
from tests.helpers import advance_to_stage, build_game, run_shuffle


def _system(interval=0.1):
    bus = EventBus()
    world = create_world(bus)
    system = DistractionSystem(world, bus, interval=interval)
    toggles = []
    bus.subscribe(EVENT_DISTRACTION_TOGGLED, lambda sender, **k: toggles.append(k["flash_on"]))
    return bus, world, system, toggles


def test_only_stages_with_the_effect_start_it():
    bus, world, system, _ = _system()
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(3))
    assert system.effect is None
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    assert isinstance(system.effect, DistractionEffect)


def test_flash_toggles_every_interval():
    bus, world, system, toggles = _system(interval=0.1)
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    for _ in range(4):
        bus.emit(EVENT_TICK, dt=0.1)
    assert toggles == [True, False, True, False]
    assert system.effect.toggles == 4


def test_large_tick_catches_up_on_toggles():
    bus, world, system, toggles = _system(interval=0.1)
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    bus.emit(EVENT_TICK, dt=0.35)
    assert toggles == [True, False, True]


def test_effect_stops_when_shuffle_completes():
    bus, world, system, toggles = _system()
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    bus.emit(EVENT_TICK, dt=0.1)
    bus.emit(EVENT_SHUFFLE_COMPLETE, ball_cup_index=0)
    assert system.effect is None
    assert toggles[-1] is False
    bus.emit(EVENT_TICK, dt=1.0)
    assert toggles == [True, False]


def test_cancel_stops_effect():
    bus, world, system, _ = _system()
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    bus.emit(EVENT_SHUFFLE_CANCEL, reason="reset")
    assert system.effect is None


def test_zero_interval_never_toggles():
    bus, world, system, toggles = _system(interval=0.0)
    bus.emit(EVENT_SHUFFLE_START, config=get_stage_config(4))
    bus.emit(EVENT_TICK, dt=1.0)
    assert toggles == []


def test_stage_four_round_flashes_only_while_mixing():
    game = build_game(seed=3)
    advance_to_stage(game, 4)
    toggles = []
    game.bus.subscribe(EVENT_DISTRACTION_TOGGLED, lambda sender, **k: toggles.append(k["flash_on"]))
    run_shuffle(game)
    assert toggles
    assert toggles[-1] is False
    assert game.distraction.effect is None

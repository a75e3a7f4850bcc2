import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import logging
import random

from shellgame.config import GameSettings
from shellgame.events.bus import EventBus
from shellgame.events.bus import EVENT_TICK, EVENT_SWAP_STARTED, EVENT_SWAP_COMPLETED, EVENT_SHUFFLE_COMPLETE
from shellgame.systems.distraction_system import DistractionSystem
from shellgame.systems.game_state_machine import GameStateMachine
from shellgame.systems.shuffle_scheduler import ShuffleScheduler
from shellgame.utils.session import get_cups, get_session
from shellgame.world import create_world

# Usage: python debug_shuffle.py [stage] [seed]
stage = int(sys.argv[1]) if len(sys.argv) > 1 else 1
seed = int(sys.argv[2]) if len(sys.argv) > 2 else 0

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

bus=EventBus()
world=create_world(bus, rng=random.Random(seed), settings=GameSettings(seed=seed, debug=True))
ShuffleScheduler(world,bus)
DistractionSystem(world,bus)
machine=GameStateMachine(world,bus)
session=get_session(world)

# Jump straight to the requested stage.
machine._enter_stage(stage)
machine.setup_round()

received=[]
for ev in [EVENT_SWAP_STARTED, EVENT_SWAP_COMPLETED, EVENT_SHUFFLE_COMPLETE]:
    bus.subscribe(ev, lambda s, _ev=ev, **k: received.append((tick, _ev, k)))

tick=0
print('stage', stage, 'seed', seed, 'ball under cup', session.ball_cup_index + 1)
machine.start()
while session.phase.name == 'MIXING':
    tick+=1
    bus.emit(EVENT_TICK, dt=1/60)
for at, ev, payload in received:
    print(f'{at:5d} {ev:18s} {payload}')
print('finished after', tick, 'ticks; phase', session.phase.name)
print('cups by slot:', [(cup.index + 1, cup.home_slot) for cup in get_cups(world)])

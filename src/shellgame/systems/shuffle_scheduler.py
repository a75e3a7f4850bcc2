"""Builds and animates the swap sequence that scrambles the cups.

Swaps exchange the ``home_slot`` of two cups. Cup identities never move, so
the ball (tracked by cup identity on the session) stays with its cup no matter
how the table is scrambled.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from esper import World

from shellgame.components.cup import Cup
from shellgame.components.round_config import RoundConfig
from shellgame.components.swap_operation import SwapOperation
from shellgame.constants import (
    LARGE_TABLE_CUP_COUNT,
    MAX_CONCURRENT_SWAPS_LARGE,
    MAX_CONCURRENT_SWAPS_SMALL,
    MAX_PAIR_ATTEMPTS,
    SWAP_ARC_HEIGHT,
)
from shellgame.events.bus import (
    EVENT_SHUFFLE_CANCEL,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_SHUFFLE_START,
    EVENT_SWAP_COMPLETED,
    EVENT_SWAP_STARTED,
    EVENT_TICK,
    EventBus,
)
from shellgame.utils.session import debug_enabled, get_cups, get_session, get_swap_queue

logger = logging.getLogger("shellgame.shuffle")

Pair = Tuple[int, int]
Point = Tuple[float, float]


def _same_pair(a: Pair, b: Optional[Pair]) -> bool:
    if b is None:
        return False
    return (a[0] == b[0] and a[1] == b[1]) or (a[0] == b[1] and a[1] == b[0])


def _draw_pair(rng: random.Random, cup_count: int) -> Pair:
    first = rng.randrange(cup_count)
    second = rng.randrange(cup_count - 1)
    if second >= first:
        second += 1
    return first, second


def build_swap_queue(
    swap_count: int,
    cup_count: int,
    last_pair: Optional[Pair],
    rng: random.Random,
) -> List[Pair]:
    """Generate ``swap_count`` distinct-index pairs for a shuffle.

    A pair matching the previous one (in either order) is redrawn, seeded by
    ``last_pair`` for the first entry. After ``MAX_PAIR_ATTEMPTS`` draws the
    last draw is accepted even if it repeats. The caller keeps the final pair
    as the seed for the next call.
    """
    if cup_count < 2:
        raise ValueError(f"A shuffle needs at least two cups, got {cup_count}")
    queue: List[Pair] = []
    previous = last_pair
    for _ in range(max(0, swap_count)):
        pair = _draw_pair(rng, cup_count)
        attempts = 1
        while _same_pair(pair, previous) and attempts < MAX_PAIR_ATTEMPTS:
            pair = _draw_pair(rng, cup_count)
            attempts += 1
        if _same_pair(pair, previous):
            logger.debug("Accepting repeated pair %s after %d attempts", pair, attempts)
        queue.append(pair)
        previous = pair
    return queue


def max_concurrent_swaps(cup_count: int) -> int:
    if cup_count >= LARGE_TABLE_CUP_COUNT:
        return MAX_CONCURRENT_SWAPS_LARGE
    return MAX_CONCURRENT_SWAPS_SMALL


def arc_positions(start_a: Point, start_b: Point, t: float) -> tuple[Point, Point]:
    """Positions of both cups at ``t`` in [0, 1] along the swap arc.

    x moves linearly; y follows a quadratic curve whose control point sits
    ``SWAP_ARC_HEIGHT`` above the higher cup (y grows downward).
    """
    t = min(max(t, 0.0), 1.0)
    ax, ay = start_a
    bx, by = start_b
    apex = min(ay, by) - SWAP_ARC_HEIGHT
    u = 1.0 - t
    pos_a = (ax + (bx - ax) * t, u * u * ay + 2 * u * t * apex + t * t * by)
    pos_b = (bx + (ax - bx) * t, u * u * by + 2 * u * t * apex + t * t * ay)
    return pos_a, pos_b


class ShuffleScheduler:
    """Runs one shuffle at a time, advancing every tick until the queue drains."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        event_bus.subscribe(EVENT_SHUFFLE_START, self.on_shuffle_start)
        event_bus.subscribe(EVENT_SHUFFLE_CANCEL, self.on_shuffle_cancel)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_shuffle_start(self, sender, **kwargs):
        config = kwargs.get("config")
        if config is None:
            return
        self.start(config)

    def on_shuffle_cancel(self, sender, **kwargs):
        self.cancel()

    def on_tick(self, sender, **kwargs):
        queue = get_swap_queue(self.world)
        if queue is None or not queue.running:
            return
        self.advance()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self, config: RoundConfig) -> None:
        queue = get_swap_queue(self.world)
        session = get_session(self.world)
        if queue is None or session is None:
            return
        self._clear_operations()
        pairs = build_swap_queue(config.swap_count, config.cup_count, session.last_swap_pair, self._rng)
        if pairs:
            session.last_swap_pair = pairs[-1]
        queue.pairs.clear()
        queue.pairs.extend(pairs)
        queue.config = config
        queue.running = True
        queue.ticks = 0
        if debug_enabled(self.world):
            logger.info("Shuffle started: stage %d, %d swaps %s", config.stage, len(pairs), pairs)

    def advance(self) -> bool:
        """Run one tick of the shuffle. Returns True once the shuffle is complete."""
        queue = get_swap_queue(self.world)
        if queue is None or not queue.running or queue.config is None:
            return False
        config = queue.config
        cups = get_cups(self.world)
        queue.ticks += 1
        self._admit(queue, cups, config)
        for ent, op in list(self.world.get_component(SwapOperation)):
            op.elapsed_ticks += 1
            t = op.progress
            cup_a = cups[op.slot_a]
            cup_b = cups[op.slot_b]
            cup_a.position, cup_b.position = arc_positions(op.start_a, op.start_b, t)
            if t >= 1.0 and not op.completed:
                self._commit(ent, op, cup_a, cup_b)
        if not queue.pairs and not self._active_operations():
            self._finish(queue, cups)
            return True
        return False

    def cancel(self) -> None:
        """Drop the running shuffle and snap every cup back to its home slot."""
        queue = get_swap_queue(self.world)
        if queue is not None:
            queue.pairs.clear()
            queue.running = False
            queue.config = None
        self._clear_operations()
        for cup in get_cups(self.world):
            cup.position = cup.home_slot

    @property
    def running(self) -> bool:
        queue = get_swap_queue(self.world)
        return bool(queue and queue.running)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _admit(self, queue, cups: List[Cup], config: RoundConfig) -> None:
        capacity = max_concurrent_swaps(config.cup_count)
        active = self._active_operations()
        while len(active) < capacity and queue.pairs:
            slot_a, slot_b = queue.pairs[0]
            if any(op.uses(slot_a) or op.uses(slot_b) for op in active):
                # Stays at the head of the queue until the busy swap lands.
                break
            queue.pairs.popleft()
            op = SwapOperation(
                slot_a=slot_a,
                slot_b=slot_b,
                start_a=cups[slot_a].home_slot,
                start_b=cups[slot_b].home_slot,
                duration_ticks=max(1, config.swap_duration_ticks),
            )
            self.world.create_entity(op)
            active.append(op)
            self.event_bus.emit(EVENT_SWAP_STARTED, slot_a=slot_a, slot_b=slot_b)

    def _commit(self, ent: int, op: SwapOperation, cup_a: Cup, cup_b: Cup) -> None:
        op.completed = True
        cup_a.home_slot = op.start_b
        cup_b.home_slot = op.start_a
        cup_a.position = cup_a.home_slot
        cup_b.position = cup_b.home_slot
        self.world.delete_entity(ent, immediate=True)
        if debug_enabled(self.world):
            session = get_session(self.world)
            ball = session.ball_cup_index + 1 if session is not None else "?"
            logger.info("Swap done: cup %d <-> cup %d, ball under cup %s", cup_a.index + 1, cup_b.index + 1, ball)
        self.event_bus.emit(EVENT_SWAP_COMPLETED, slot_a=op.slot_a, slot_b=op.slot_b)

    def _finish(self, queue, cups: List[Cup]) -> None:
        queue.running = False
        queue.config = None
        session = get_session(self.world)
        if session is None:
            return
        if not 0 <= session.ball_cup_index < len(cups):
            logger.warning("Ball cup index %d out of range, resetting to the first cup", session.ball_cup_index)
            session.ball_cup_index = 0
        if debug_enabled(self.world) and cups:
            cup = cups[session.ball_cup_index]
            logger.info("Final ball position: cup %d at %s", cup.index + 1, cup.home_slot)
        self.event_bus.emit(EVENT_SHUFFLE_COMPLETE, ball_cup_index=session.ball_cup_index)

    def _active_operations(self) -> List[SwapOperation]:
        return [op for _, op in self.world.get_component(SwapOperation)]

    def _clear_operations(self) -> None:
        for ent in [ent for ent, _ in self.world.get_component(SwapOperation)]:
            self.world.delete_entity(ent, immediate=True)

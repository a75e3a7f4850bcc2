import random

import pytest

from shellgame.constants import MAX_PAIR_ATTEMPTS
from shellgame.systems.shuffle_scheduler import build_swap_queue


def _same(a, b):
    return set(a) == set(b)


@pytest.mark.parametrize("cup_count", [3, 5])
def test_queue_has_requested_length_and_valid_pairs(cup_count):
    rng = random.Random(11)
    for swap_count in (0, 1, 4, 30):
        queue = build_swap_queue(swap_count, cup_count, None, rng)
        assert len(queue) == swap_count
        for a, b in queue:
            assert a != b
            assert 0 <= a < cup_count
            assert 0 <= b < cup_count


@pytest.mark.parametrize("cup_count", [3, 5])
def test_consecutive_pairs_never_repeat(cup_count):
    queue = build_swap_queue(500, cup_count, None, random.Random(3))
    for previous, current in zip(queue, queue[1:]):
        assert not _same(previous, current)


def test_seed_pair_from_previous_call_is_avoided():
    rng = random.Random(5)
    for _ in range(200):
        queue = build_swap_queue(1, 3, (0, 1), rng)
        assert not _same(queue[0], (0, 1))
        queue = build_swap_queue(1, 3, (2, 1), rng)
        assert not _same(queue[0], (1, 2))


def test_two_cups_degrade_to_repeats_instead_of_looping():
    queue = build_swap_queue(10, 2, (0, 1), random.Random(0))
    assert len(queue) == 10
    assert all(_same(pair, (0, 1)) for pair in queue)


class _StuckRandom:
    """Always returns zero, so every draw is the pair (0, 1)."""

    def __init__(self):
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        return 0


def test_anti_repeat_gives_up_after_attempt_cap():
    rng = _StuckRandom()
    queue = build_swap_queue(1, 5, (1, 0), rng)
    assert queue == [(0, 1)]
    # Two random numbers per draw.
    assert rng.calls == 2 * MAX_PAIR_ATTEMPTS


def test_fewer_than_two_cups_is_rejected():
    with pytest.raises(ValueError):
        build_swap_queue(3, 1, None, random.Random(0))


def test_same_seed_gives_same_queue():
    assert build_swap_queue(15, 5, None, random.Random(42)) == build_swap_queue(15, 5, None, random.Random(42))

import pytest

from shellgame.components.game_session import GameSession
from shellgame.events.bus import EVENT_REWARD_CHANGED, EventBus
from shellgame.systems.reward_ledger import RewardLedger, partial_reward


@pytest.mark.parametrize(
    "stage, retries_used, budget, expected",
    [
        (1, 3, None, 0),
        (2, 0, 0, 0),
        (3, 0, 1, 0),
        (3, 1, 1, 2),
        (4, 1, 2, 4),
        (4, 2, 2, 2),
        (4, 0, 2, 0),
    ],
)
def test_partial_reward_table(stage, retries_used, budget, expected):
    assert partial_reward(stage, retries_used, budget) == expected


def test_clear_adds_and_banks_reward():
    bus = EventBus()
    changes = []
    bus.subscribe(EVENT_REWARD_CHANGED, lambda sender, **k: changes.append(k))
    ledger = RewardLedger(bus)
    session = GameSession()
    ledger.record_clear(session, 1)
    ledger.record_clear(session, 2)
    assert session.total_reward == 3
    assert session.banked_reward == 3
    assert [c["delta"] for c in changes] == [1, 2]
    assert changes[-1]["reason"] == "stage_clear"


def test_rollback_returns_to_banked_total():
    ledger = RewardLedger()
    session = GameSession(total_reward=5, banked_reward=3)
    assert ledger.rollback(session) == 3
    assert session.total_reward == 3


def test_partial_only_paid_during_a_retry_sequence():
    ledger = RewardLedger()
    session = GameSession(stage=3, total_reward=8, banked_reward=8, retries_used=1)
    assert ledger.grant_partial(session, 1) == 0
    assert session.total_reward == 8

    session.is_retry_in_progress = True
    assert ledger.grant_partial(session, 1) == 2
    assert session.total_reward == 10
    assert session.banked_reward == 10
    assert session.partial_reward == 2


def test_clear_zeroes_everything():
    ledger = RewardLedger()
    session = GameSession(total_reward=10, banked_reward=10, partial_reward=2)
    ledger.clear(session)
    assert (session.total_reward, session.banked_reward, session.partial_reward) == (0, 0, 0)


def test_banked_reward_never_decreases():
    ledger = RewardLedger()
    session = GameSession(total_reward=2, banked_reward=6)
    ledger._bank(session)
    assert session.banked_reward == 6

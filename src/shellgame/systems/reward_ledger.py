"""Reward accounting: stage clears, checkpoints and partial rewards."""
from __future__ import annotations

import logging

from shellgame.components.game_session import GameSession
from shellgame.events.bus import EVENT_REWARD_CHANGED, EventBus

logger = logging.getLogger("shellgame.rewards")

# Consolation rewards for abandoning a retry sequence.
STAGE3_PARTIAL_REWARD = 2
STAGE4_PARTIAL_REWARD_ONE_LEFT = 4
STAGE4_PARTIAL_REWARD_NONE_LEFT = 2


def partial_reward(stage: int, retries_used: int, retry_budget: int | None) -> int:
    """Consolation reward for giving up after at least one retry.

    Stage 3 pays a flat amount. Stage 4 pays more when exactly one retry was
    still unused and less when none were left. Other stages pay nothing.
    """
    if retries_used <= 0:
        return 0
    if stage == 3:
        return STAGE3_PARTIAL_REWARD
    if stage == 4 and retry_budget is not None:
        remaining = retry_budget - retries_used
        if remaining == 1:
            return STAGE4_PARTIAL_REWARD_ONE_LEFT
        if remaining == 0:
            return STAGE4_PARTIAL_REWARD_NONE_LEFT
    return 0


class RewardLedger:
    """Applies reward changes to the session and announces them.

    ``banked_reward`` is a checkpoint: it only grows within a session and is
    what ``total_reward`` falls back to on game over.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus

    def record_clear(self, session: GameSession, reward: int) -> int:
        session.total_reward += reward
        self._bank(session)
        self._announce(session, reward, "stage_clear")
        return session.total_reward

    def rollback(self, session: GameSession) -> int:
        delta = session.banked_reward - session.total_reward
        session.total_reward = session.banked_reward
        if delta:
            self._announce(session, delta, "game_over")
        return session.total_reward

    def grant_partial(self, session: GameSession, retry_budget: int | None) -> int:
        """Credit and bank the partial reward for the current retry sequence, if any."""
        amount = 0
        if session.is_retry_in_progress:
            amount = partial_reward(session.stage, session.retries_used, retry_budget)
        session.partial_reward = amount
        if amount:
            session.total_reward += amount
            self._bank(session)
            logger.info("Partial reward +%d at stage %d", amount, session.stage)
            self._announce(session, amount, "partial")
        return amount

    def clear(self, session: GameSession) -> None:
        delta = -session.total_reward
        session.total_reward = 0
        session.banked_reward = 0
        session.partial_reward = 0
        if delta:
            self._announce(session, delta, "reset")

    def _bank(self, session: GameSession) -> None:
        if session.total_reward > session.banked_reward:
            session.banked_reward = session.total_reward

    def _announce(self, session: GameSession, delta: int, reason: str) -> None:
        if self.event_bus is None:
            return
        self.event_bus.emit(
            EVENT_REWARD_CHANGED,
            total_reward=session.total_reward,
            banked_reward=session.banked_reward,
            delta=delta,
            reason=reason,
        )

"""Round and stage sequencing for the shell game.

Every external stimulus (a command, a cup selection, or a delayed transition
coming due) produces at most one phase change. Delayed transitions are keyed
to the session generation, so anything scheduled before a reset is dropped
when it comes due.
"""
from __future__ import annotations

import logging
import random

from esper import World

from shellgame.components.game_session import GamePhase, GameSession
from shellgame.components.round_config import RoundConfig
from shellgame.config import GameSettings
from shellgame.events.bus import (
    EVENT_CHOICE_GO,
    EVENT_CHOICE_STOP,
    EVENT_CUP_SELECTED,
    EVENT_FINAL_REWARD,
    EVENT_GAME_OVER,
    EVENT_GIVE_UP_REQUEST,
    EVENT_PHASE_CHANGED,
    EVENT_RESET_REQUEST,
    EVENT_RETRY_GRANTED,
    EVENT_ROUND_READY,
    EVENT_ROUND_RESULT,
    EVENT_SESSION_RESET,
    EVENT_SHUFFLE_CANCEL,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_SHUFFLE_START,
    EVENT_STAGE_CLEARED,
    EVENT_START_REQUEST,
    EVENT_TICK,
    EventBus,
)
from shellgame.factories.cups import spawn_cups
from shellgame.factories.stages import FIRST_STAGE, LAST_STAGE, get_stage_config
from shellgame.systems.reward_ledger import RewardLedger
from shellgame.utils.delayed_transitions import DelayedTransitions
from shellgame.utils.session import get_cups, get_session

logger = logging.getLogger("shellgame.flow")


class GameStateMachine:
    """Drives round phases, stage progression, retries and game over."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        settings: GameSettings | None = None,
        ledger: RewardLedger | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.settings = settings or getattr(world, "settings", None) or GameSettings()
        self.ledger = ledger or RewardLedger(event_bus)
        self._delays = DelayedTransitions()

        self.event_bus.subscribe(EVENT_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_CUP_SELECTED, self._on_cup_selected)
        self.event_bus.subscribe(EVENT_CHOICE_GO, self._on_choice_go)
        self.event_bus.subscribe(EVENT_CHOICE_STOP, self._on_choice_stop)
        self.event_bus.subscribe(EVENT_GIVE_UP_REQUEST, self._on_give_up)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self._on_reset_request)
        self.event_bus.subscribe(EVENT_SHUFFLE_COMPLETE, self._on_shuffle_complete)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

        self.reset_session(reason="startup")

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_start_request(self, sender, **payload) -> None:
        self.start()

    def _on_cup_selected(self, sender, **payload) -> None:
        cup_index = payload.get("cup_index")
        if cup_index is None:
            return
        try:
            index = int(cup_index)
        except (TypeError, ValueError):
            return
        self.select(index)

    def _on_choice_go(self, sender, **payload) -> None:
        self.choose_go()

    def _on_choice_stop(self, sender, **payload) -> None:
        self.choose_stop()

    def _on_give_up(self, sender, **payload) -> None:
        self.give_up()

    def _on_reset_request(self, sender, **payload) -> None:
        self.reset()

    def _on_shuffle_complete(self, sender, **payload) -> None:
        session = self.session
        if session.phase != GamePhase.MIXING:
            return
        self._set_phase(GamePhase.SELECTING)

    def _on_tick(self, sender, **kwargs) -> None:
        dt = kwargs.get("dt", self.settings.tick_rate)
        self._delays.advance(dt, self.session.generation)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> bool:
        session = self.session
        if session.phase != GamePhase.READY or self._delays.pending:
            logger.debug("Ignoring start in phase %s", session.phase.name)
            return False
        session.message = ""
        self._set_phase(GamePhase.MIXING)
        self.event_bus.emit(EVENT_SHUFFLE_START, config=self.config)
        return True

    def select(self, cup_index: int) -> bool:
        session = self.session
        if session.phase != GamePhase.SELECTING or self._delays.pending:
            logger.debug("Ignoring selection of cup %d in phase %s", cup_index, session.phase.name)
            return False
        cups = get_cups(self.world)
        if not 0 <= cup_index < len(cups):
            logger.debug("Ignoring selection of unknown cup %d", cup_index)
            return False
        cups[cup_index].is_selected = True
        session.selected_cup = cup_index
        self._set_phase(GamePhase.RESULT)
        self._schedule("reveal", self.settings.reveal_delay, self._reveal)
        return True

    def choose_go(self) -> bool:
        session = self.session
        if session.phase != GamePhase.CHOICE or self._delays.pending:
            return False
        if session.stage >= LAST_STAGE:
            logger.debug("GO is not available on the last stage")
            return False
        self._enter_stage(session.stage + 1)
        self.setup_round()
        return True

    def choose_stop(self) -> bool:
        session = self.session
        if session.phase != GamePhase.CHOICE or self._delays.pending:
            return False
        self._present_final()
        return True

    def give_up(self) -> bool:
        """Abandon a retry sequence and collect whatever partial reward it earned."""
        session = self.session
        if session.phase != GamePhase.READY or not session.is_retry_in_progress or self._delays.pending:
            return False
        self._present_final()
        return True

    def reset(self) -> None:
        self.reset_session(reason="reset")

    def reset_session(self, *, reason: str) -> None:
        """Return the session to stage 1 with no rewards and set up a fresh round."""
        session = self.session
        self._delays.cancel_all()
        session.generation += 1
        self.event_bus.emit(EVENT_SHUFFLE_CANCEL, reason=reason)
        self.ledger.clear(session)
        session.last_swap_pair = None
        self._enter_stage(FIRST_STAGE)
        self.event_bus.emit(EVENT_SESSION_RESET, reason=reason, generation=session.generation)
        self.setup_round()

    def setup_round(self) -> None:
        """Lay out the cups for the current stage and hide the ball under a random one."""
        session = self.session
        config = self.config
        spawn_cups(self.world, config.cup_count)
        session.ball_cup_index = self._rng.randrange(config.cup_count)
        session.selected_cup = None
        session.last_guess_correct = None
        session.message = ""
        self._set_phase(GamePhase.READY)
        self.event_bus.emit(EVENT_ROUND_READY, stage=session.stage, cup_count=config.cup_count)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def session(self) -> GameSession:
        session = get_session(self.world)
        if session is None:
            session = GameSession()
            self.world.create_entity(session)
        return session

    @property
    def config(self) -> RoundConfig:
        return get_stage_config(self.session.stage)

    @property
    def transition_pending(self) -> bool:
        return self._delays.pending

    @property
    def can_go(self) -> bool:
        session = self.session
        return session.phase == GamePhase.CHOICE and session.stage < LAST_STAGE and not self._delays.pending

    @property
    def can_give_up(self) -> bool:
        session = self.session
        return session.phase == GamePhase.READY and session.is_retry_in_progress and not self._delays.pending

    # ------------------------------------------------------------------
    # Delayed transitions
    # ------------------------------------------------------------------

    def _reveal(self) -> None:
        session = self.session
        config = self.config
        correct = session.selected_cup == session.ball_cup_index
        session.last_guess_correct = correct
        self.event_bus.emit(
            EVENT_ROUND_RESULT,
            stage=session.stage,
            correct=correct,
            selected=session.selected_cup,
            ball_cup_index=session.ball_cup_index,
        )
        if correct:
            session.is_retry_in_progress = False
            self.ledger.record_clear(session, config.reward_on_clear)
            session.message = f"Correct! Stage {session.stage} cleared, +{config.reward_on_clear}"
            logger.info("Stage %d cleared, total reward %d", session.stage, session.total_reward)
            self.event_bus.emit(
                EVENT_STAGE_CLEARED,
                stage=session.stage,
                reward=config.reward_on_clear,
                total_reward=session.total_reward,
            )
            self._schedule("present_choice", self.settings.choice_delay, self._present_choice)
        else:
            session.message = "Wrong cup!"
            self._schedule("resolve_miss", self.settings.branch_delay, self._resolve_miss)

    def _present_choice(self) -> None:
        self._set_phase(GamePhase.CHOICE)

    def _resolve_miss(self) -> None:
        session = self.session
        remaining = session.retries_remaining
        if remaining is None or remaining > 0:
            if remaining is not None:
                session.retries_remaining = remaining - 1
                session.retries_used += 1
            session.is_retry_in_progress = True
            session.message = "Try again!"
            self._set_phase(GamePhase.RETRY)
            self.event_bus.emit(EVENT_RETRY_GRANTED, stage=session.stage, retries_remaining=session.retries_remaining)
            self._schedule("retry_round", self.settings.retry_delay, self.setup_round)
        else:
            session.message = "Game over! Starting again from stage 1."
            self._set_phase(GamePhase.GAME_OVER)
            self._schedule("game_over_restart", self.settings.game_over_delay, self._restart_after_game_over)

    def _restart_after_game_over(self) -> None:
        session = self.session
        failed_stage = session.stage
        self.ledger.rollback(session)
        partial = self.ledger.grant_partial(session, self.config.retry_budget)
        logger.info("Game over at stage %d, total reward %d", failed_stage, session.total_reward)
        self.event_bus.emit(EVENT_GAME_OVER, stage=failed_stage, total_reward=session.total_reward, partial_reward=partial)
        self._enter_stage(FIRST_STAGE)
        self.setup_round()

    def _present_final(self) -> None:
        session = self.session
        partial = self.ledger.grant_partial(session, self.config.retry_budget)
        if partial:
            session.message = f"Game finished! Partial reward +{partial}, total reward {session.total_reward}"
        else:
            session.message = f"Game finished! Total reward {session.total_reward}"
        self._set_phase(GamePhase.FINAL)
        self.event_bus.emit(EVENT_FINAL_REWARD, total_reward=session.total_reward, partial_reward=partial)
        self._schedule("final_reset", self.settings.final_delay, self._finish_game)

    def _finish_game(self) -> None:
        self.reset_session(reason="final")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _enter_stage(self, stage: int) -> None:
        session = self.session
        session.stage = stage
        session.retries_remaining = get_stage_config(stage).retry_budget
        session.retries_used = 0
        session.is_retry_in_progress = False
        session.partial_reward = 0

    def _schedule(self, name: str, delay: float, callback) -> None:
        self._delays.schedule(name, delay, self.session.generation, callback)

    def _set_phase(self, phase: GamePhase) -> None:
        session = self.session
        previous = session.phase
        session.phase = phase
        if previous != phase:
            logger.debug("Phase %s -> %s (stage %d)", previous.name, phase.name, session.stage)
        self.event_bus.emit(EVENT_PHASE_CHANGED, previous_phase=previous, new_phase=phase, stage=session.stage)

"""Read-only HUD view of the session for the renderer."""
from __future__ import annotations

from dataclasses import dataclass

from shellgame.components.game_session import GamePhase, GameSession
from shellgame.factories.stages import LAST_STAGE, get_stage_config

PHASE_PROMPTS: dict[GamePhase, str] = {
    GamePhase.READY: "Press start to begin!",
    GamePhase.MIXING: "Watch the cups carefully!",
    GamePhase.SELECTING: "Find the cup with the ball!",
    GamePhase.CHOICE: "GO for the next stage or STOP and keep your reward?",
}


def retry_budget_text(retry_budget: int | None, retries_remaining: int | None) -> str:
    if retry_budget is None:
        return "Retries: unlimited"
    if retry_budget == 0:
        return "Retries: none"
    return f"Retries: {retries_remaining or 0} remaining"


def phase_prompt(phase: GamePhase) -> str:
    return PHASE_PROMPTS.get(phase, "")


@dataclass(frozen=True, slots=True)
class HudSnapshot:
    stage: int
    stage_count: int
    total_reward: int
    retry_text: str
    prompt: str
    message: str
    phase: GamePhase

    @property
    def stage_text(self) -> str:
        return f"Stage {self.stage} / {self.stage_count}"


def build_hud(session: GameSession) -> HudSnapshot:
    config = get_stage_config(session.stage)
    return HudSnapshot(
        stage=session.stage,
        stage_count=LAST_STAGE,
        total_reward=session.total_reward,
        retry_text=retry_budget_text(config.retry_budget, session.retries_remaining),
        prompt=phase_prompt(session.phase),
        message=session.message,
        phase=session.phase,
    )

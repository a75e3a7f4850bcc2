from shellgame.components.game_session import GamePhase, GameSession
from shellgame.ui.hud import build_hud, phase_prompt, retry_budget_text


def test_retry_text_per_budget():
    assert retry_budget_text(None, None) == "Retries: unlimited"
    assert retry_budget_text(0, 0) == "Retries: none"
    assert retry_budget_text(2, 1) == "Retries: 1 remaining"
    assert retry_budget_text(1, 0) == "Retries: 0 remaining"


def test_phase_prompts():
    assert phase_prompt(GamePhase.READY) == "Press start to begin!"
    assert phase_prompt(GamePhase.MIXING) == "Watch the cups carefully!"
    assert phase_prompt(GamePhase.SELECTING) == "Find the cup with the ball!"
    assert phase_prompt(GamePhase.RESULT) == ""


def test_hud_snapshot_reflects_session():
    session = GameSession(stage=4, total_reward=8, retries_remaining=2, phase=GamePhase.SELECTING, message="hi")
    hud = build_hud(session)
    assert hud.stage_text == "Stage 4 / 4"
    assert hud.total_reward == 8
    assert hud.retry_text == "Retries: 2 remaining"
    assert hud.prompt == "Find the cup with the ball!"
    assert hud.message == "hi"

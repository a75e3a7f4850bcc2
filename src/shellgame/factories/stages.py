"""Difficulty table for the four stages."""
from __future__ import annotations

from shellgame.components.round_config import RoundConfig

# swap_duration_ticks: frames per swap, lower is faster.
STAGE_CONFIGS: dict[int, RoundConfig] = {
    1: RoundConfig(stage=1, cup_count=3, swap_duration_ticks=50, swap_count=4, retry_budget=None, reward_on_clear=1),
    2: RoundConfig(stage=2, cup_count=3, swap_duration_ticks=30, swap_count=6, retry_budget=0, reward_on_clear=2),
    3: RoundConfig(stage=3, cup_count=5, swap_duration_ticks=20, swap_count=15, retry_budget=1, reward_on_clear=5),
    4: RoundConfig(
        stage=4,
        cup_count=5,
        swap_duration_ticks=10,
        swap_count=30,
        retry_budget=2,
        reward_on_clear=7,
        distraction_effect=True,
    ),
}

FIRST_STAGE = min(STAGE_CONFIGS)
LAST_STAGE = max(STAGE_CONFIGS)


def get_stage_config(stage: int) -> RoundConfig:
    try:
        return STAGE_CONFIGS[stage]
    except KeyError:
        raise KeyError(f"Unknown stage: {stage}") from None

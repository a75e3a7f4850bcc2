from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RoundConfig:
    """Fixed difficulty parameters for one stage.

    ``retry_budget`` of ``None`` means unlimited retries.
    """

    stage: int
    cup_count: int
    swap_duration_ticks: int
    swap_count: int
    retry_budget: Optional[int]
    reward_on_clear: int
    distraction_effect: bool = False

    @property
    def unlimited_retries(self) -> bool:
        return self.retry_budget is None

from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SwapOperation:
    slot_a: int  # index into the cup arrangement
    slot_b: int
    start_a: Tuple[float, float]
    start_b: Tuple[float, float]
    duration_ticks: int = 1
    elapsed_ticks: int = 0
    completed: bool = False

    @property
    def progress(self) -> float:
        """Fraction of the swap done, 0..1. Counted in whole ticks so it lands exactly on 1."""
        return min(1.0, self.elapsed_ticks / max(1, self.duration_ticks))

    def uses(self, slot: int) -> bool:
        return slot == self.slot_a or slot == self.slot_b

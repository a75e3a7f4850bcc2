from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Cup:
    """A cup on the table.

    ``index`` is the cup's identity and never changes. ``home_slot`` is the
    layout slot the cup currently owns; swaps exchange home slots, not cups.
    ``position`` equals ``home_slot`` except while a swap is in flight.
    """

    index: int
    home_slot: Tuple[float, float]
    position: Tuple[float, float]
    radius: float = 50.0
    is_selected: bool = False

    def contains(self, x: float, y: float) -> bool:
        dx = x - self.position[0]
        dy = y - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius

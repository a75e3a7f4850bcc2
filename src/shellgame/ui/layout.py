"""Fixed slot coordinates for the cup table (model space, y grows downward)."""
from __future__ import annotations

from typing import List, Tuple

from shellgame.constants import (
    CONTROL_BAR_Y,
    CONTROL_BUTTON_GAP,
    CONTROL_BUTTON_WIDTH,
    WINDOW_WIDTH,
)

Slot = Tuple[float, float]

_THREE_CUP_ROW: tuple[Slot, ...] = ((250.0, 300.0), (450.0, 300.0), (650.0, 300.0))

# Two cups over three, roughly a pentagon.
_FIVE_CUP_PENTAGON: tuple[Slot, ...] = (
    (300.0, 200.0),
    (600.0, 200.0),
    (200.0, 350.0),
    (450.0, 350.0),
    (700.0, 350.0),
)


def layout_slots(cup_count: int) -> List[Slot]:
    """Return the slot coordinates for ``cup_count`` cups, in slot order."""
    if cup_count == 3:
        return list(_THREE_CUP_ROW)
    if cup_count == 5:
        return list(_FIVE_CUP_PENTAGON)
    raise ValueError(f"Unsupported cup count: {cup_count}")


def control_button_centers(count: int, *, width: float = WINDOW_WIDTH) -> List[Slot]:
    """Centre points for ``count`` buttons laid out in one row along the bottom edge."""
    if count <= 0:
        return []
    total = count * CONTROL_BUTTON_WIDTH + (count - 1) * CONTROL_BUTTON_GAP
    left = (width - total) / 2 + CONTROL_BUTTON_WIDTH / 2
    step = CONTROL_BUTTON_WIDTH + CONTROL_BUTTON_GAP
    return [(left + i * step, float(CONTROL_BAR_Y)) for i in range(count)]

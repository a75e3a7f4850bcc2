from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from shellgame.components.round_config import RoundConfig


@dataclass(slots=True)
class SwapQueue:
    """Pending swap pairs for the shuffle currently running, if any."""

    pairs: Deque[Tuple[int, int]] = field(default_factory=deque)
    config: Optional[RoundConfig] = None
    running: bool = False
    ticks: int = 0

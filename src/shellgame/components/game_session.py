"""Session resource describing the state of the current game."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class GamePhase(Enum):
    """Round phases driven by the game state machine."""
    READY = auto()
    MIXING = auto()
    SELECTING = auto()
    RESULT = auto()
    RETRY = auto()
    GAME_OVER = auto()
    CHOICE = auto()
    FINAL = auto()


@dataclass
class GameSession:
    """Singleton component holding stage, rewards, retries and ball location.

    ``retries_remaining`` is ``None`` while the stage allows unlimited retries.
    ``generation`` increases on every session reset so delayed transitions
    scheduled before the reset can be recognised as stale.
    """
    stage: int = 1
    phase: GamePhase = GamePhase.READY
    total_reward: int = 0
    banked_reward: int = 0
    retries_remaining: Optional[int] = None
    retries_used: int = 0
    is_retry_in_progress: bool = False
    ball_cup_index: int = 0
    last_swap_pair: Optional[Tuple[int, int]] = None
    selected_cup: Optional[int] = None
    last_guess_correct: Optional[bool] = None
    partial_reward: int = 0
    message: str = ""
    generation: int = 0

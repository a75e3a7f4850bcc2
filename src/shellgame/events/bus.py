from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                    # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                      # payload: x, y, button (model coordinates)
EVENT_CUP_SELECTED = "cup_selected"                    # payload: cup_index=int
EVENT_DEBUG_TOGGLE = "debug_toggle"                    # payload: None
EVENT_DEBUG_CHANGED = "debug_changed"                  # payload: enabled=bool


# ============================================================================
# COMMANDS
# ============================================================================
EVENT_START_REQUEST = "start_request"                  # payload: None
EVENT_CHOICE_GO = "choice_go"                          # payload: None
EVENT_CHOICE_STOP = "choice_stop"                      # payload: None
EVENT_GIVE_UP_REQUEST = "give_up_request"              # payload: None
EVENT_RESET_REQUEST = "reset_request"                  # payload: None


# ============================================================================
# SHUFFLE
# ============================================================================
EVENT_SHUFFLE_START = "shuffle_start"                  # payload: config=RoundConfig
EVENT_SHUFFLE_CANCEL = "shuffle_cancel"                # payload: reason=str
EVENT_SWAP_STARTED = "swap_started"                    # payload: slot_a=int, slot_b=int
EVENT_SWAP_COMPLETED = "swap_completed"                # payload: slot_a=int, slot_b=int
EVENT_SHUFFLE_COMPLETE = "shuffle_complete"            # payload: ball_cup_index=int
EVENT_DISTRACTION_TOGGLED = "distraction_toggled"      # payload: flash_on=bool


# ============================================================================
# GAME FLOW & REWARDS
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"                  # payload: previous_phase=GamePhase|None, new_phase=GamePhase, stage=int
EVENT_ROUND_READY = "round_ready"                      # payload: stage=int, cup_count=int
EVENT_ROUND_RESULT = "round_result"                    # payload: stage=int, correct=bool, selected=int, ball_cup_index=int
EVENT_STAGE_CLEARED = "stage_cleared"                  # payload: stage=int, reward=int, total_reward=int
EVENT_RETRY_GRANTED = "retry_granted"                  # payload: stage=int, retries_remaining=int|None
EVENT_GAME_OVER = "game_over"                          # payload: stage=int, total_reward=int, partial_reward=int
EVENT_FINAL_REWARD = "final_reward"                    # payload: total_reward=int, partial_reward=int
EVENT_REWARD_CHANGED = "reward_changed"                # payload: total_reward=int, banked_reward=int, delta=int, reason=str
EVENT_SESSION_RESET = "session_reset"                  # payload: reason=str, generation=int

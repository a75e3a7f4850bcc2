"""Components for the on-screen control buttons."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Commands a control button can issue."""
    START = auto()
    RESET = auto()
    GO = auto()
    STOP = auto()
    GIVE_UP = auto()


@dataclass
class ControlButton:
    """Clickable button in the control bar (model coordinates, centre anchored)."""
    label: str
    action: ControlAction
    x: float = 0.0
    y: float = 0.0
    width: float = 150.0
    height: float = 44.0
    enabled: bool = True
    visible: bool = True

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return self.x - half_w <= x <= self.x + half_w and self.y - half_h <= y <= self.y + half_h


@dataclass
class ControlTag:
    """Marker component so control entities can be cleaned up together."""
    pass

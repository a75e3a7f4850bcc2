from dataclasses import dataclass


@dataclass(slots=True)
class DistractionEffect:
    """Flashing overlay that runs while cups are mixing on distracting stages."""

    interval: float = 0.1
    elapsed: float = 0.0
    flash_on: bool = False
    toggles: int = 0

from dataclasses import dataclass


@dataclass(slots=True)
class DebugOverlay:
    """Shows cup identities and enables verbose shuffle logging. No effect on game logic."""

    enabled: bool = False

"""Runtime settings for the shell game.

Geometry and tuning values that never change at runtime live in
``shellgame.constants``; the values here can be overridden from the
environment (or a ``.env`` file loaded by the entry point).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class GameSettings:
    tick_rate: float = 1 / 60
    seed: int | None = None
    debug: bool = False
    log_level: str = "INFO"

    # Pauses between phases, in seconds.
    reveal_delay: float = 0.5
    choice_delay: float = 1.5
    branch_delay: float = 1.5
    retry_delay: float = 1.0
    game_over_delay: float = 2.0
    final_delay: float = 4.0


def load_settings(env: Mapping[str, str] | None = None) -> GameSettings:
    """Build settings from ``SHELLGAME_*`` environment variables."""
    source = os.environ if env is None else env
    return GameSettings(
        tick_rate=_env_float(source.get("SHELLGAME_TICK_RATE"), 1 / 60),
        seed=_env_int(source.get("SHELLGAME_SEED")),
        debug=_env_bool(source.get("SHELLGAME_DEBUG"), False),
        log_level=(source.get("SHELLGAME_LOG_LEVEL") or "INFO").upper(),
    )

"""Factory helpers for the control bar entities."""
from __future__ import annotations

from esper import World

from shellgame.components.game_session import GamePhase, GameSession
from shellgame.constants import CONTROL_BUTTON_HEIGHT, CONTROL_BUTTON_WIDTH, WINDOW_WIDTH
from shellgame.factories.stages import LAST_STAGE
from shellgame.ui.components import ControlAction, ControlButton, ControlTag
from shellgame.ui.layout import control_button_centers

_START_LABELS = {
    GamePhase.READY: "Start shuffle",
    GamePhase.MIXING: "Mixing...",
    GamePhase.SELECTING: "Pick a cup!",
}

_BUTTON_ORDER = (
    ControlAction.START,
    ControlAction.GIVE_UP,
    ControlAction.GO,
    ControlAction.STOP,
    ControlAction.RESET,
)

_DEFAULT_LABELS = {
    ControlAction.START: "Start shuffle",
    ControlAction.GIVE_UP: "Give up",
    ControlAction.GO: "GO (next stage)",
    ControlAction.STOP: "STOP (take reward)",
    ControlAction.RESET: "Reset",
}


def spawn_controls(world: World) -> None:
    """Create one button entity per control action."""
    clear_controls(world)
    for action in _BUTTON_ORDER:
        world.create_entity(
            ControlButton(
                label=_DEFAULT_LABELS[action],
                action=action,
                width=CONTROL_BUTTON_WIDTH,
                height=CONTROL_BUTTON_HEIGHT,
            ),
            ControlTag(),
        )


def clear_controls(world: World) -> None:
    for ent in [ent for ent, _ in world.get_component(ControlTag)]:
        world.delete_entity(ent, immediate=True)


def refresh_controls(
    world: World,
    session: GameSession,
    *,
    transition_pending: bool = False,
    width: float = WINDOW_WIDTH,
) -> None:
    """Update label, visibility and placement of each button for the current phase."""
    phase = session.phase
    in_choice = phase == GamePhase.CHOICE
    buttons = sorted(
        (button for _, button in world.get_component(ControlButton)),
        key=lambda button: _BUTTON_ORDER.index(button.action),
    )
    for button in buttons:
        if button.action == ControlAction.START:
            button.visible = not in_choice
            button.label = _START_LABELS.get(phase, _DEFAULT_LABELS[ControlAction.START])
            button.enabled = phase == GamePhase.READY and not transition_pending
        elif button.action == ControlAction.GIVE_UP:
            button.visible = phase == GamePhase.READY and session.is_retry_in_progress
            button.enabled = button.visible and not transition_pending
        elif button.action == ControlAction.GO:
            button.visible = in_choice and session.stage < LAST_STAGE
            button.enabled = button.visible and not transition_pending
        elif button.action == ControlAction.STOP:
            button.visible = in_choice
            button.enabled = button.visible and not transition_pending
        elif button.action == ControlAction.RESET:
            button.visible = True
            button.enabled = True
    visible = [button for button in buttons if button.visible]
    for button, (x, y) in zip(visible, control_button_centers(len(visible), width=width)):
        button.x = x
        button.y = y

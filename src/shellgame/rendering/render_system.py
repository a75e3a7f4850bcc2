"""Arcade renderer for the table, HUD and control bar.

Model coordinates grow downward from the top-left corner; arcade's grow
upward from the bottom-left, so every y is flipped on the way out.
"""
from __future__ import annotations

from typing import Iterable

import arcade
from esper import World

from shellgame.components.cup import Cup
from shellgame.components.distraction_effect import DistractionEffect
from shellgame.components.game_session import GamePhase
from shellgame.constants import BALL_RADIUS, PROMPT_Y
from shellgame.events.bus import EventBus
from shellgame.ui.components import ControlButton
from shellgame.ui.hud import build_hud
from shellgame.utils.session import debug_enabled, get_cups, get_session

BACKGROUND_TOP = (102, 126, 234)
BACKGROUND_BOTTOM = (118, 75, 162)
CUP_COLOR = (76, 175, 80)
CUP_SELECTED_COLOR = (255, 235, 59)
CUP_OUTLINE_COLOR = (51, 51, 51)
SHADOW_COLOR = (0, 0, 0, 77)
BALL_COLOR = (255, 68, 68)
BALL_HIGHLIGHT = (255, 102, 102)
FLASH_COLOR = (255, 255, 255, 110)
CORRECT_COLOR = (76, 175, 80)
WRONG_COLOR = (244, 67, 54)
FINAL_COLOR = (255, 215, 0)

_BALL_VISIBLE_PHASES = (GamePhase.READY, GamePhase.RESULT, GamePhase.RETRY, GamePhase.GAME_OVER)


class RenderSystem:
    """Draws one frame per call. Reads world state, never writes it."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window

    def process(self) -> None:
        session = get_session(self.world)
        if session is None:
            return
        self.draw_frame(get_cups(self.world), session.phase)

    def draw_frame(self, cups: Iterable[Cup], phase: GamePhase) -> None:
        self._draw_background()
        session = get_session(self.world)
        ball_index = session.ball_cup_index if session is not None else None
        show_numbers = debug_enabled(self.world)
        show_ball = phase in _BALL_VISIBLE_PHASES
        for cup in cups:
            self._draw_cup(cup, show_numbers)
            if show_ball and cup.index == ball_index:
                self._draw_ball(cup)
        self._draw_hud()
        self._draw_controls()
        self._draw_distraction()

    # ------------------------------------------------------------------

    def _sy(self, y: float) -> float:
        return self.window.height - y

    def _draw_background(self) -> None:
        # Two-band approximation of the vertical gradient.
        half = self.window.height / 2
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, half, self.window.height, BACKGROUND_TOP)
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, half, BACKGROUND_BOTTOM)

    def _draw_cup(self, cup: Cup, show_numbers: bool) -> None:
        x, y = cup.position[0], self._sy(cup.position[1])
        arcade.draw_circle_filled(x + 5, y - 5, cup.radius, SHADOW_COLOR)
        arcade.draw_circle_filled(x, y, cup.radius, CUP_SELECTED_COLOR if cup.is_selected else CUP_COLOR)
        arcade.draw_circle_outline(x, y, cup.radius, CUP_OUTLINE_COLOR, border_width=4)
        if show_numbers:
            arcade.draw_text(
                str(cup.index + 1),
                x,
                y,
                arcade.color.BLACK,
                24,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _draw_ball(self, cup: Cup) -> None:
        x, y = cup.position[0], self._sy(cup.position[1])
        arcade.draw_circle_filled(x + 3, y - 3, BALL_RADIUS - 2, SHADOW_COLOR)
        arcade.draw_circle_filled(x, y, BALL_RADIUS, BALL_COLOR)
        arcade.draw_circle_filled(x - 5, y + 5, 12, BALL_HIGHLIGHT)

    def _draw_hud(self) -> None:
        session = get_session(self.world)
        if session is None:
            return
        hud = build_hud(session)
        top = self.window.height
        arcade.draw_text(hud.stage_text, 16, top - 28, arcade.color.WHITE, 16, bold=True)
        arcade.draw_text(hud.retry_text, 16, top - 52, arcade.color.WHITE, 14)
        arcade.draw_text(
            f"Total reward: {hud.total_reward}",
            self.window.width - 16,
            top - 28,
            arcade.color.WHITE,
            16,
            anchor_x="right",
            bold=True,
        )
        if hud.prompt:
            arcade.draw_text(hud.prompt, self.window.width / 2, self._sy(PROMPT_Y), arcade.color.WHITE, 22, anchor_x="center", bold=True)
        if hud.message:
            arcade.draw_text(
                hud.message,
                self.window.width / 2,
                self._sy(PROMPT_Y + 40),
                self._message_color(session),
                18,
                anchor_x="center",
                bold=True,
            )

    def _message_color(self, session):
        if session.phase == GamePhase.FINAL:
            return FINAL_COLOR
        if session.last_guess_correct is True:
            return CORRECT_COLOR
        if session.last_guess_correct is False:
            return WRONG_COLOR
        return arcade.color.WHITE

    def _draw_controls(self) -> None:
        for _, button in self.world.get_component(ControlButton):
            if not button.visible:
                continue
            left = button.x - button.width / 2
            bottom = self._sy(button.y) - button.height / 2
            fill_color = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
            text_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, text_color, border_width=2)
            arcade.draw_text(
                button.label,
                button.x,
                self._sy(button.y),
                text_color,
                13,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _draw_distraction(self) -> None:
        for _, effect in self.world.get_component(DistractionEffect):
            if effect.flash_on:
                arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, FLASH_COLOR)
            return

"""The title screen and the game-over screen."""

from __future__ import annotations

from typing import Protocol

from zxinterceptor.images import GAME_OVER_IMAGE, INTERCEPTOR_LOGO
from zxinterceptor.input import ScriptedKeyboard
from zxinterceptor.renderer import Renderer
from zxinterceptor.statemachine import StateController

STRESS_TEST_TEXT = "\x14\x03Stress Test Mode"
PRESS_ANY_KEY = "\x14\x47Press Any Key"

TITLE_LINES: tuple[tuple[str, int, int], ...] = (
    ("\x14\x46Space Bounty Hunter", 7, 9),
    ("\x14\x47 Controls: W, S, [Space]", 4, 15),
    (PRESS_ANY_KEY, 10, 13),
    ("\x14\x03 Yandex Retro Games Battle 2019", 0, 22),
)

GAME_OVER_PROMPT = (PRESS_ANY_KEY, 10, 16)
GAME_OVER_SCORE_POSITION = (0, 23)


class KeyWaiter(Protocol):
    """What the screens need from a keyboard: blocking waits."""

    def wait_key(self) -> None: ...

    def wait_no_key(self) -> None: ...


def _as_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def game_over_text(score: int) -> str:
    """Return the control-coded line that shows the money earned."""
    return f"\x14\x03Money: {_as_int16(score)}$"


class TitleScreenStateController:
    """Shows the logo and the credits, then waits for a key."""

    def __init__(
        self,
        next_state_controller: StateController | None,
        renderer: Renderer,
        keyboard: KeyWaiter | None = None,
        stress_test: bool = False,
    ) -> None:
        self.renderer = renderer
        self.keyboard: KeyWaiter = keyboard if keyboard is not None else ScriptedKeyboard()
        self.stress_test = stress_test
        self.state_controller = StateController(self.step, next_state_controller)

    def step(self) -> None:
        renderer = self.renderer
        renderer.render_fullscreen_image(INTERCEPTOR_LOGO)
        if self.stress_test:
            renderer.render_text(STRESS_TEST_TEXT, 0, 0)
        for text, x, y in TITLE_LINES:
            renderer.render_text(text, x, y)
        renderer.update_screen()
        self.keyboard.wait_key()
        renderer.clear_screen()


class GameOverStateController:
    """Shows the game-over picture and the final money, then waits for a key."""

    def __init__(
        self,
        next_state_controller: StateController | None,
        renderer: Renderer,
        keyboard: KeyWaiter | None = None,
        score: int = 0,
        stress_test: bool = False,
    ) -> None:
        self.renderer = renderer
        self.keyboard: KeyWaiter = keyboard if keyboard is not None else ScriptedKeyboard()
        self.score = score
        self.stress_test = stress_test
        self.state_controller = StateController(self.step, next_state_controller)

    def step(self) -> None:
        renderer = self.renderer
        renderer.render_fullscreen_image(GAME_OVER_IMAGE)
        text, x, y = GAME_OVER_PROMPT
        renderer.render_text(text, x, y)
        renderer.render_text(game_over_text(self.score), *GAME_OVER_SCORE_POSITION)
        renderer.update_screen()
        if not self.stress_test:
            self.keyboard.wait_no_key()
            self.keyboard.wait_key()
        renderer.clear_screen()
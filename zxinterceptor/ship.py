"""The player's interceptor and its bullet."""

from __future__ import annotations

from zxinterceptor.gameobject import make_game_object
from zxinterceptor.images import BULLET, INTERCEPTOR
from zxinterceptor.input import InputController, ScriptedKeyboard
from zxinterceptor.renderer import Renderer
from zxinterceptor.sound import Speaker

SHIP_MAX_Y = 160
SHIP_SPEED = 4
BULLET_SPEED = 8
BULLET_MAX_X = 240


class InterceptorController:
    """Moves the ship with W and S and fires its bullet with Space."""

    def __init__(
        self,
        renderer: Renderer,
        keyboard: ScriptedKeyboard | None = None,
        speaker: Speaker | None = None,
    ) -> None:
        self.renderer = renderer
        self.speaker = speaker if speaker is not None else Speaker()
        self.interceptor = make_game_object(0, 0, INTERCEPTOR)
        self.bullet = make_game_object(0, 0, BULLET)
        self.is_bullet_should_fly = False

        self.interceptor.retain()
        self.bullet.retain()
        renderer.add_game_object(self.interceptor)
        renderer.add_game_object(self.bullet)
        self.bullet.hide()

        self.input_controller = InputController(
            keyboard if keyboard is not None else ScriptedKeyboard()
        )

    def close(self) -> None:
        """Drop the controller's references and take its objects off the renderer."""
        self.interceptor.release()
        self.bullet.release()
        self.renderer.remove_game_object(self.interceptor)
        self.renderer.remove_game_object(self.bullet)

    def step(self) -> None:
        controls = self.input_controller
        controls.step()

        interceptor = self.interceptor
        bullet = self.bullet

        if controls.is_down_pressed and interceptor.y < SHIP_MAX_Y:
            interceptor.y += SHIP_SPEED
        elif controls.is_up_pressed and interceptor.y > 0:
            interceptor.y -= SHIP_SPEED

        self.is_bullet_should_fly = controls.is_fire_pressed or bullet.x > 0
        if not self.is_bullet_should_fly:
            return

        if bullet.x == 0:
            bullet.show()
            self.speaker.play_bullet_fire()
            bullet.x = BULLET_SPEED
            bullet.y = interceptor.y
        elif bullet.x > BULLET_MAX_X:
            bullet.hide()
            bullet.x = 0
        else:
            bullet.x += BULLET_SPEED
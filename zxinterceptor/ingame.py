"""The in-game screen: ship, mines, enemy, status line and collisions."""

from __future__ import annotations

from collections.abc import Callable

from zxinterceptor.collider import ColliderController
from zxinterceptor.enemy import EnemyController
from zxinterceptor.gameobject import GameObject
from zxinterceptor.images import IN_GAME_BACKGROUND
from zxinterceptor.input import ScriptedKeyboard
from zxinterceptor.mines import SpaceMinesController
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource
from zxinterceptor.ship import InterceptorController
from zxinterceptor.sound import Speaker
from zxinterceptor.statemachine import StateController
from zxinterceptor.ui import UIController

FULL_HEALTH = 100
MINE_DAMAGE = 20
BULLET_DAMAGE = 10
ENEMY_REWARD = 100
MINE_REWARD = 10
STRESS_MAX_DAMAGE = 30

FinishCallback = Callable[["InGameStateController", int], None]


def _as_int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


class InGameStateController:
    """Runs one game, from the first frame until the ship is destroyed."""

    def __init__(
        self,
        renderer: Renderer,
        keyboard: ScriptedKeyboard | None = None,
        rng: RandomSource | None = None,
        speaker: Speaker | None = None,
        on_finish: FinishCallback | None = None,
        stress_test: bool = False,
    ) -> None:
        self.renderer = renderer
        self.keyboard = keyboard if keyboard is not None else ScriptedKeyboard()
        self.rng = rng if rng is not None else RandomSource()
        self.speaker = speaker if speaker is not None else Speaker()
        self.on_finish = on_finish
        self.stress_test = stress_test
        self.state_controller = StateController(self.step, None)
        self.is_started = False
        self.score = 0
        self.ship_health = 0
        self.interceptor_controller: InterceptorController | None = None
        self.space_mines_controller: SpaceMinesController | None = None
        self.enemy_controller: EnemyController | None = None
        self.ui_controller: UIController | None = None
        self.collider_controller: ColliderController | None = None

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value & 0xFFFF

    @property
    def ship_health(self) -> int:
        return self._ship_health

    @ship_health.setter
    def ship_health(self, value: int) -> None:
        self._ship_health = _as_int8(value)

    def initialize_controllers(self) -> None:
        """Draw the background and create every in-game controller."""
        self.is_started = True
        renderer = self.renderer
        renderer.clear_screen()
        renderer.render_fullscreen_image(IN_GAME_BACKGROUND)

        ship = InterceptorController(renderer, self.keyboard, self.speaker)
        mines = SpaceMinesController(renderer, self.rng)
        enemy = EnemyController(renderer, self.rng, self.speaker)
        self.interceptor_controller = ship
        self.space_mines_controller = mines
        self.enemy_controller = enemy
        self.ui_controller = UIController(renderer)
        self.collider_controller = ColliderController(
            ship.interceptor,
            mines.space_mine_one,
            mines.space_mine_two,
            enemy.bullet,
            ship.bullet,
            enemy.enemy,
            self,
        )

        self.score = 0
        self.ship_health = FULL_HEALTH
        self.state_controller.next_state_controller = None

    def deinitialize_controllers(self) -> None:
        """Tear down the controllers created for the running game."""
        if not self.is_started:
            raise RuntimeError("the game has not been started")
        self.is_started = False
        assert self.interceptor_controller is not None
        assert self.space_mines_controller is not None
        assert self.enemy_controller is not None
        assert self.collider_controller is not None
        self.interceptor_controller.close()
        self.space_mines_controller.close()
        self.enemy_controller.close()
        self.collider_controller.close()
        self.interceptor_controller = None
        self.space_mines_controller = None
        self.enemy_controller = None
        self.ui_controller = None
        self.collider_controller = None

    def initialize_controllers_if_needed(self) -> None:
        if not self.is_started:
            self.initialize_controllers()

    def show_game_over(self) -> None:
        """Report the final score and end the game."""
        if self.on_finish is not None:
            self.on_finish(self, self.score)
        self.deinitialize_controllers()

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` health; the game ends when none is left."""
        if not 0 <= damage <= 0xFF:
            raise ValueError(f"damage must fit a byte, got {damage}")
        self.ship_health -= damage
        if self.ship_health <= 0 and self.is_started:
            self.show_game_over()

    def step(self) -> None:
        self.initialize_controllers_if_needed()
        assert self.interceptor_controller is not None
        assert self.space_mines_controller is not None
        assert self.enemy_controller is not None
        assert self.ui_controller is not None
        assert self.collider_controller is not None

        self.interceptor_controller.step()
        self.space_mines_controller.step()
        self.enemy_controller.step()

        renderer = self.renderer
        renderer.render_game_objects()
        self.ui_controller.step(self.score, self.ship_health)
        self.collider_controller.step()
        renderer.update_screen()

        if self.stress_test:
            self.take_damage(self.rng.unsigned_char(STRESS_MAX_DAMAGE))

    def mine_collides_with_interceptor(
        self, collider: ColliderController | None, mine: GameObject, interceptor: GameObject
    ) -> None:
        self.speaker.beep()
        mine.hide()
        self.take_damage(MINE_DAMAGE)

    def enemy_bullet_collides_with_interceptor(
        self,
        collider: ColliderController | None,
        enemy_bullet: GameObject,
        interceptor: GameObject,
    ) -> None:
        self.speaker.beep()
        enemy_bullet.hide()
        self.take_damage(BULLET_DAMAGE)

    def interceptor_bullet_collides_with_enemy(
        self,
        collider: ColliderController | None,
        interceptor_bullet: GameObject,
        enemy: GameObject,
    ) -> None:
        self.speaker.beep()
        interceptor_bullet.hide()
        enemy.hide()
        self.score += ENEMY_REWARD

    def mine_collides_with_interceptor_bullet(
        self,
        collider: ColliderController | None,
        mine: GameObject,
        interceptor_bullet: GameObject,
    ) -> None:
        self.speaker.beep()
        mine.hide()
        interceptor_bullet.hide()
        self.score += MINE_REWARD
"""The enemy ship and the bullets it fires."""

from __future__ import annotations

from enum import IntEnum

from zxinterceptor.gameobject import make_game_object
from zxinterceptor.images import BULLET, ENEMY
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource
from zxinterceptor.sound import Speaker

ENEMY_START_X = 240
ENEMY_MAX_START_Y = 130
ENEMY_MAX_Y = 160
BULLET_SPEED = 8


class EnemyCommand(IntEnum):
    STAY = 0
    MOVE_UP = 1
    MOVE_DOWN = 2
    COUNT = 3


class EnemyController:
    """Spawns the enemy, moves it at random and fires its bullet."""

    def __init__(
        self,
        renderer: Renderer,
        rng: RandomSource | None = None,
        speaker: Speaker | None = None,
    ) -> None:
        self.renderer = renderer
        self.rng = rng if rng is not None else RandomSource()
        self.speaker = speaker if speaker is not None else Speaker()
        self.enemy = make_game_object(0, 0, ENEMY)
        self.bullet = make_game_object(0, 0, BULLET)
        self.enemy_command = EnemyCommand.STAY
        self.enemy.hide()
        self.bullet.hide()
        renderer.add_game_object(self.enemy)
        renderer.add_game_object(self.bullet)

    def close(self) -> None:
        """Take the enemy and its bullet off the renderer."""
        self.renderer.remove_game_object(self.enemy)
        self.renderer.remove_game_object(self.bullet)

    def put_enemy_if_needed(self) -> None:
        if not self.enemy.is_hidden():
            return
        self.enemy.x = ENEMY_START_X
        self.enemy.y = self.rng.unsigned_char(ENEMY_MAX_START_Y)

    def fire_bullet_if_needed(self) -> None:
        roll = self.rng.rand()
        if roll > 3000 and self.bullet.is_hidden():
            self.speaker.play_bullet_fire()
            self.bullet.x = self.enemy.x
            self.bullet.y = self.enemy.y

    def change_current_enemy_command(self) -> None:
        self.enemy_command = EnemyCommand(self.rng.unsigned_char(EnemyCommand.COUNT))

    def enemy_step_if_needed(self) -> None:
        enemy = self.enemy
        if enemy.is_hidden():
            return
        roll = self.rng.rand()
        if roll < 1000:
            self.fire_bullet_if_needed()
        if roll < 2000:
            self.change_current_enemy_command()
        if self.enemy_command is EnemyCommand.MOVE_UP:
            if enemy.y > 0:
                enemy.y -= 1
        elif self.enemy_command is EnemyCommand.MOVE_DOWN:
            if enemy.y < ENEMY_MAX_Y:
                enemy.y += 1

    def bullet_fly_if_needed(self) -> None:
        bullet = self.bullet
        if bullet.is_hidden():
            return
        if bullet.x > BULLET_SPEED:
            bullet.x -= BULLET_SPEED
        else:
            bullet.hide()

    def step(self) -> None:
        if self.enemy.is_hidden() and self.rng.rand() < 200:
            self.put_enemy_if_needed()
        self.enemy_step_if_needed()
        self.bullet_fly_if_needed()
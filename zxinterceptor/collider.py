"""Collision checks between the ship, the mines, the enemy and the bullets."""

from __future__ import annotations

from typing import Protocol

from zxinterceptor.gameobject import GameObject
from zxinterceptor.screen import SPRITE_HEIGHT, SPRITE_WIDTH


class CollisionDelegate(Protocol):
    """Receives the collisions found by a :class:`ColliderController`."""

    def mine_collides_with_interceptor(
        self, collider: ColliderController, mine: GameObject, interceptor: GameObject
    ) -> None: ...

    def enemy_bullet_collides_with_interceptor(
        self, collider: ColliderController, enemy_bullet: GameObject, interceptor: GameObject
    ) -> None: ...

    def interceptor_bullet_collides_with_enemy(
        self, collider: ColliderController, interceptor_bullet: GameObject, enemy: GameObject
    ) -> None: ...

    def mine_collides_with_interceptor_bullet(
        self, collider: ColliderController, mine: GameObject, interceptor_bullet: GameObject
    ) -> None: ...


def is_colliding(a: GameObject, b: GameObject) -> bool:
    """Return True when the sprite boxes of ``a`` and ``b`` touch or overlap."""
    if a.x > b.x + SPRITE_WIDTH:
        return False
    if a.y > b.y + SPRITE_HEIGHT:
        return False
    if a.x + SPRITE_WIDTH < b.x:
        return False
    if a.y + SPRITE_HEIGHT < b.y:
        return False
    return True


class ColliderController:
    """Checks every frame for the four kinds of collision and reports them."""

    def __init__(
        self,
        interceptor: GameObject,
        mine_one: GameObject,
        mine_two: GameObject,
        enemy_bullet: GameObject,
        interceptor_bullet: GameObject,
        enemy: GameObject,
        delegate: CollisionDelegate,
    ) -> None:
        self.interceptor = interceptor
        self.mine_one = mine_one
        self.mine_two = mine_two
        self.enemy_bullet = enemy_bullet
        self.interceptor_bullet = interceptor_bullet
        self.enemy = enemy
        self.delegate = delegate
        for held in self._held():
            held.retain()

    def _held(self) -> tuple[GameObject, ...]:
        return (self.interceptor, self.mine_one, self.mine_two, self.enemy_bullet)

    def close(self) -> None:
        """Release the references taken on creation."""
        for held in self._held():
            held.release()

    def step(self) -> None:
        mine_one = self.mine_one
        mine_two = self.mine_two
        interceptor = self.interceptor

        mine_one_hits_ship = not mine_one.is_hidden() and is_colliding(interceptor, mine_one)
        mine_two_hits_ship = not mine_two.is_hidden() and is_colliding(interceptor, mine_two)
        if mine_one_hits_ship:
            self.delegate.mine_collides_with_interceptor(self, mine_one, interceptor)
        elif mine_two_hits_ship:
            self.delegate.mine_collides_with_interceptor(self, mine_two, interceptor)

        enemy_bullet = self.enemy_bullet
        if not enemy_bullet.is_hidden() and is_colliding(enemy_bullet, interceptor):
            self.delegate.enemy_bullet_collides_with_interceptor(self, enemy_bullet, interceptor)

        bullet = self.interceptor_bullet
        enemy = self.enemy
        if not bullet.is_hidden() and not enemy.is_hidden() and is_colliding(bullet, enemy):
            self.delegate.interceptor_bullet_collides_with_enemy(self, bullet, enemy)

        mine_one_hit = (
            not mine_one.is_hidden() and not bullet.is_hidden() and is_colliding(bullet, mine_one)
        )
        mine_two_hit = (
            not mine_two.is_hidden() and not bullet.is_hidden() and is_colliding(bullet, mine_two)
        )
        if mine_one_hit:
            self.delegate.mine_collides_with_interceptor_bullet(self, mine_one, bullet)
        elif mine_two_hit:
            self.delegate.mine_collides_with_interceptor_bullet(self, mine_two, bullet)
"""Two space mines drifting from right to left."""

from __future__ import annotations

from zxinterceptor.gameobject import GameObject, make_game_object
from zxinterceptor.images import MINE
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource

MINE_START_X = 254
MINE_MAX_Y = 160
MINE_SPEED = 4


class SpaceMinesController:
    """Places mines at random heights and moves them towards the ship."""

    def __init__(self, renderer: Renderer, rng: RandomSource | None = None) -> None:
        self.renderer = renderer
        self.rng = rng if rng is not None else RandomSource()
        self.space_mine_one = make_game_object(0, 0, MINE)
        self.space_mine_two = make_game_object(0, 0, MINE)
        for mine in self._mines():
            mine.hide()
        for mine in self._mines():
            renderer.add_game_object(mine)

    def _mines(self) -> tuple[GameObject, GameObject]:
        return self.space_mine_one, self.space_mine_two

    def close(self) -> None:
        """Take the mines off the renderer."""
        for mine in self._mines():
            self.renderer.remove_game_object(mine)

    def _put_if_needed(self, mine: GameObject) -> None:
        if mine.is_hidden():
            mine.x = MINE_START_X
            mine.y = self.rng.unsigned_char(MINE_MAX_Y)

    def put_mine_one_if_needed(self) -> None:
        self._put_if_needed(self.space_mine_one)

    def put_mine_two_if_needed(self) -> None:
        self._put_if_needed(self.space_mine_two)

    def step(self) -> None:
        roll = self.rng.rand()
        if roll < 100:
            self.put_mine_one_if_needed()
        elif roll < 200:
            self.put_mine_two_if_needed()
        else:
            for mine in self._mines():
                if mine.x > MINE_SPEED:
                    mine.x -= MINE_SPEED
                else:
                    mine.hide()
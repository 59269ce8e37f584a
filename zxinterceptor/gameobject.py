"""Game objects: positioned, reference-counted sprites."""

from __future__ import annotations

from dataclasses import dataclass

from zxinterceptor.screen import INK_BLUE

INK_ATTR_MASK = 0xF8
HIDDEN_Y = 200
OFFSCREEN_COLUMN = 34
_BYTE = 0xFF


@dataclass
class Sprite:
    """A software sprite as placed on the screen, in pixel coordinates."""

    columns: int = 3
    attr_mask: int = INK_ATTR_MASK
    attr: int = INK_BLUE
    x: int = 0
    y: int = 0
    graphic: object = None
    deleted: bool = False


class GameObject:
    """A sprite with a byte-sized position and a byte-sized reference count."""

    def __init__(self, sprite: Sprite, graphic: object, x: int = 0, y: int = 0) -> None:
        self.sprite = sprite
        self.graphic = graphic
        self.x = x
        self.y = y
        self.reference_count = 0
        self.before_hide_x = 0
        self.before_hide_y = 0

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = value & _BYTE

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = value & _BYTE

    def retain(self) -> None:
        """Take one more reference."""
        self.reference_count = (self.reference_count + 1) & _BYTE

    def release(self) -> bool:
        """Drop one reference; return True when the sprite was deleted."""
        if self.sprite.deleted:
            raise RuntimeError("game object has already been deleted")
        self.reference_count = (self.reference_count - 1) & _BYTE
        if self.reference_count < 1:
            self.sprite.x = OFFSCREEN_COLUMN * 8
            self.sprite.y = 0
            self.sprite.deleted = True
            return True
        return False

    def hide(self) -> None:
        """Move off the play field, remembering the current position."""
        self.before_hide_x = self.x
        self.before_hide_y = self.y
        self.y = HIDDEN_Y

    def show(self) -> None:
        """Return to the position held before the last hide."""
        self.x = self.before_hide_x
        self.y = self.before_hide_y

    def is_hidden(self) -> bool:
        return self.y == HIDDEN_Y


def make_game_object(x: int, y: int, graphic: object) -> GameObject:
    """Create a three-column masked sprite in blue ink, wrapped in a game object."""
    sprite = Sprite(columns=3, attr_mask=INK_ATTR_MASK, attr=INK_BLUE)
    return GameObject(sprite, graphic, x, y)
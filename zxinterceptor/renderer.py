"""Draws game objects, pictures and text onto a tile screen."""

from __future__ import annotations

from zxinterceptor.gameobject import GameObject
from zxinterceptor.screen import (
    BRIGHT,
    INK_BLACK,
    INK_BLUE,
    PAPER_BLACK,
    PAPER_WHITE,
    FullscreenImage,
    TileScreen,
)

MAX_GAME_OBJECTS = 16
CLEAR_ATTR = BRIGHT | INK_BLACK | PAPER_BLACK
INITIAL_ATTR = INK_BLUE | PAPER_WHITE


class Renderer:
    """Owns the screen and up to sixteen drawn game objects."""

    def __init__(self, screen: TileScreen | None = None) -> None:
        self.screen = screen if screen is not None else TileScreen()
        self.border = INK_BLACK
        self.screen.clear(INITIAL_ATTR, " ")
        self.game_objects: list[GameObject | None] = [None] * MAX_GAME_OBJECTS
        self.updates = 0

    def add_game_object(self, game_object: GameObject) -> bool:
        """Put the object in the first free slot; False when all are taken."""
        for index, slot in enumerate(self.game_objects):
            if slot is None:
                self.game_objects[index] = game_object
                game_object.retain()
                return True
        return False

    def remove_game_object(self, game_object: GameObject) -> None:
        """Release and clear every slot holding this object."""
        for index, slot in enumerate(self.game_objects):
            if slot is game_object:
                slot.release()
                self.game_objects[index] = None

    def remove_all_game_objects(self) -> None:
        for index, slot in enumerate(self.game_objects):
            if slot is not None:
                slot.release()
                self.game_objects[index] = None

    def close(self) -> None:
        self.remove_all_game_objects()

    def render_game_objects(self) -> None:
        """Move each sprite to its object's position, stopping at the first empty slot."""
        for game_object in self.game_objects:
            if game_object is None:
                return
            sprite = game_object.sprite
            sprite.x = game_object.x
            sprite.y = game_object.y
            sprite.graphic = game_object.graphic

    def clear_screen(self) -> None:
        self.screen.clear(CLEAR_ATTR, " ")

    def render_fullscreen_image(self, image: FullscreenImage) -> None:
        """Clear the screen, load the image's tiles and print its layout."""
        self.clear_screen()
        for code, pattern in image.tile_patterns():
            self.screen.define_tile(code, pattern)
        self.screen.print_string(image.ptiles, 0, 0)

    def update_screen(self) -> None:
        """Present the current frame."""
        self.updates += 1

    def render_text(self, text: bytes | str, x: int, y: int) -> None:
        """Print control-coded text at column ``x``, row ``y``."""
        self.screen.print_string(text, y, x)
"""Keyboard state and the up/down/fire controls read from it."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Key(Enum):
    W = "w"
    S = "s"
    SPACE = " "


class ScriptedKeyboard:
    """A keyboard whose held keys are set by the caller.

    When the game waits for a key, the scripted user taps one; when it waits
    for all keys to be let go, every held key is released.
    """

    def __init__(self, pressed: Iterable[Key | str] | None = None) -> None:
        self._pressed: set[Key] = {Key(k) for k in pressed or ()}
        self.key_waits = 0
        self.no_key_waits = 0

    def press(self, *args: Key | str) -> None:
        self._pressed.update(Key(k) for k in args)

    def release(self, *args: Key | str) -> None:
        for key in args:
            self._pressed.discard(Key(key))

    def is_pressed(self, key: Key | str) -> bool:
        return Key(key) in self._pressed

    def wait_key(self) -> None:
        """Wait until a key is pressed."""
        self.key_waits += 1

    def wait_no_key(self) -> None:
        """Wait until no key is held."""
        self._pressed.clear()
        self.no_key_waits += 1


class InputController:
    """Reads W (up), S (down) and Space (fire) once per frame."""

    def __init__(self, keyboard: ScriptedKeyboard) -> None:
        self.keyboard = keyboard
        self.reset()

    def reset(self) -> None:
        self.is_up_pressed = False
        self.is_down_pressed = False
        self.is_fire_pressed = False

    def step(self) -> None:
        self.reset()
        if self.keyboard.is_pressed(Key.W):
            self.is_up_pressed = True
        elif self.keyboard.is_pressed(Key.S):
            self.is_down_pressed = True
        if self.keyboard.is_pressed(Key.SPACE):
            self.is_fire_pressed = True
"""The one-bit speaker and the game's sound effects."""

from __future__ import annotations

from typing import NamedTuple


class Tone(NamedTuple):
    """One beep sent to the speaker."""

    duration: int
    pitch: int


class Speaker:
    """Records the beeps the game plays, in order."""

    def __init__(self) -> None:
        self.played: list[Tone] = []

    def bit_beep(self, duration: int, pitch: int) -> None:
        """Play a square-wave beep."""
        if duration < 0 or pitch < 0:
            raise ValueError("duration and pitch must not be negative")
        self.played.append(Tone(duration, pitch))

    def beep(self) -> None:
        """The collision sound."""
        self.bit_beep(10, 256)

    def play_bullet_fire(self) -> None:
        """The sound of a bullet being fired."""
        self.bit_beep(6, 200)
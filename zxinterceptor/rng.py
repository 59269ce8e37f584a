"""Pseudo-random numbers in the range the game logic expects."""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterable

RAND_MAX = 32767
UNSIGNED_CHAR_MAX = 255


class RandomSource:
    """A ``rand()``-style generator, either seeded or replaying a fixed script.

    ``seed`` may be ``None`` (unpredictable), an integer seed, or an iterable of
    values in ``0..RAND_MAX`` that are returned in order and then repeated.
    """

    def __init__(self, seed: int | Iterable[int] | None = None) -> None:
        if seed is None or isinstance(seed, int):
            self._random: random.Random | None = random.Random(seed)
            self._script = None
            return
        values = list(seed)
        if not values:
            raise ValueError("a scripted random sequence must not be empty")
        for value in values:
            if not 0 <= value <= RAND_MAX:
                raise ValueError(f"scripted value {value} is outside 0..{RAND_MAX}")
        self._random = None
        self._script = itertools.cycle(values)

    def rand(self) -> int:
        """Return the next number in ``0..RAND_MAX``."""
        if self._script is not None:
            return next(self._script)
        assert self._random is not None
        return self._random.randint(0, RAND_MAX)

    def unsigned_char(self, maximal: int) -> int:
        """Return a number in ``0..maximal``; ``maximal`` must fit a byte."""
        if not 0 <= maximal <= UNSIGNED_CHAR_MAX:
            raise ValueError(f"maximal must be within 0..{UNSIGNED_CHAR_MAX}, got {maximal}")
        return self.rand() % (maximal + 1)

    def any_unsigned_char(self) -> int:
        """Return a number in ``0..254``."""
        return self.unsigned_char(254)
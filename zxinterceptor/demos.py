"""Small sprite and graphics demonstrations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from zxinterceptor.gameobject import INK_ATTR_MASK
from zxinterceptor.screen import INK_BLUE

RUNNER_FRAME_STEP = 16
RUNNER_FRAME_WRAP = 128
DEMO_Y = 80
MANDELBROT_ITERATIONS = 100


@dataclass(frozen=True)
class SpriteFrame:
    """Where a sprite is drawn in one frame, and with which graphic."""

    x: int
    y: int
    frame: int
    columns: int
    delay_ms: int
    graphic: str
    attr: int | None = None
    attr_mask: int | None = None


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("frame count must not be negative")


def _runner() -> Iterator[SpriteFrame]:
    x = 0
    offset = 0
    while True:
        yield SpriteFrame(x, DEMO_Y, offset, 2, 50, "runner")
        x = (x + 1) & 0xFF
        offset += RUNNER_FRAME_STEP
        if offset == RUNNER_FRAME_WRAP:
            offset = 0


def _bubble(attr: int | None, attr_mask: int | None) -> Iterator[SpriteFrame]:
    x = 0
    while True:
        yield SpriteFrame(x, DEMO_Y, 0, 3, 25, "bubble", attr, attr_mask)
        x = (x + 1) & 0xFF


def runner_frames(count: int) -> list[SpriteFrame]:
    """An animated runner crossing the screen, eight frames of animation."""
    _check_count(count)
    return list(islice(_runner(), count))


def bubble_frames(count: int) -> list[SpriteFrame]:
    """A masked three-column bubble crossing the screen."""
    _check_count(count)
    return list(islice(_bubble(None, None), count))


def coloured_bubble_frames(count: int) -> list[SpriteFrame]:
    """The bubble again, with its ink coloured blue."""
    _check_count(count)
    return list(islice(_bubble(INK_BLUE, INK_ATTR_MASK), count))


def circle_frames() -> list[SpriteFrame]:
    """A circle drawn once in the top-left corner."""
    return [SpriteFrame(0, 0, 0, 2, 0, "circle")]


def mandelbrot(width: int, height: int) -> frozenset[tuple[int, int]]:
    """Return the points plotted for a Mandelbrot picture.

    ``width`` and ``height`` are the largest x and y coordinates of the
    display. Points escaping after an odd number of iterations are plotted,
    mirrored about the horizontal middle.
    """
    if width < 1 or height < 2:
        raise ValueError("width must be at least 1 and height at least 2")
    xmax = width
    ymax = height - 1
    a, b = -2.0, 2.0
    c, d = a, b
    escape = 4.0
    g = (b - a) / xmax
    h = (d - c) / ymax

    points: set[tuple[int, int]] = set()
    for y in range(ymax // 2, 0, -1):
        j = y * h + c
        for x in range(xmax, 0, -1):
            i = x * g + a
            l = m = n = o = 0.0
            for k in range(1, MANDELBROT_ITERATIONS):
                p = n - o + i
                m = 2.0 * l * m + j
                l = p
                n = l * l
                o = m * m
                if n + o >= escape:
                    if k & 1:
                        points.add((x, y))
                        points.add((x, ymax - y))
                    break
    return frozenset(points)
"""The status line: money earned and ship health."""

from __future__ import annotations

from zxinterceptor.renderer import Renderer

STATUS_ROW = 23
STATUS_COLUMN = 0
_INITIAL_SCORE = 35715
_INITIAL_SHIP_HEALTH = 69


def _as_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def format_status(score: int, ship_health: int) -> str:
    """Return the control-coded status line for ``score`` and ``ship_health``."""
    return f"\x14\x46Money:{_as_int16(score)}$ Ship:{ship_health:<3d}"


class UIController:
    """Redraws the status line whenever score or health changes."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.previous_score = _INITIAL_SCORE
        self.previous_ship_health = _INITIAL_SHIP_HEALTH

    def step(self, score: int, ship_health: int) -> bool:
        """Draw the status if it changed; return True when it was drawn."""
        if score == self.previous_score and ship_health == self.previous_ship_health:
            return False
        self.renderer.render_text(format_status(score, ship_health), STATUS_COLUMN, STATUS_ROW)
        self.previous_score = score
        self.previous_ship_health = ship_health
        return True
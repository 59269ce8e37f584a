"""A character-cell screen with user-defined tiles and control-coded printing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import IntEnum

INK_BLACK = 0x00
INK_BLUE = 0x01
PAPER_BLACK = 0x00
PAPER_WHITE = 0x38
BRIGHT = 0x40

SCREEN_COLUMNS = 32
SCREEN_ROWS = 24
TILE_BYTES = 8
SPRITE_WIDTH = 16
SPRITE_HEIGHT = 16


class Code(IntEnum):
    """Control codes understood by :meth:`TileScreen.print_string`."""

    END = 0x00
    LEFT = 0x08
    RIGHT = 0x09
    UP = 0x0A
    DOWN = 0x0B
    HOME = 0x0C
    NEWLINE = 0x0D
    REPEAT = 0x0E
    END_REPEAT = 0x0F
    ATTRIBUTE = 0x14
    AT = 0x16


@dataclass
class Cell:
    """One character cell: its colour attribute and character or tile code."""

    attr: int
    char: int


def _char_code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("a cell holds exactly one character")
        char = ord(char)
    if not 0 <= char <= 0xFF:
        raise ValueError(f"character code {char} does not fit a byte")
    return char


class TileScreen:
    """A grid of cells; codes from 128 upwards can be given 8x8 tile patterns."""

    def __init__(
        self,
        width: int = SCREEN_COLUMNS,
        height: int = SCREEN_ROWS,
        attr: int = INK_BLACK | PAPER_WHITE,
        char: str | int = " ",
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._tiles: dict[int, bytes] = {}
        self._cells: list[list[Cell]] = []
        self.clear(attr, char)

    def define_tile(self, code: int, pattern: bytes) -> None:
        """Give character ``code`` an 8-byte pixel pattern."""
        if not 0 <= code <= 0xFF:
            raise ValueError(f"tile code {code} does not fit a byte")
        data = bytes(pattern)
        if len(data) != TILE_BYTES:
            raise ValueError(f"a tile pattern has {TILE_BYTES} bytes, got {len(data)}")
        self._tiles[code] = data

    def tile(self, code: int) -> bytes:
        """Return the pattern defined for ``code``."""
        try:
            return self._tiles[code]
        except KeyError:
            raise KeyError(f"tile {code} is not defined") from None

    def clear(self, attr: int, char: str | int = " ") -> None:
        """Fill every cell with ``char`` in colour ``attr``."""
        code = _char_code(char)
        self._cells = [[Cell(attr, code) for _ in range(self.width)] for _ in range(self.height)]

    def print_string(self, data: bytes | str, row: int = 0, column: int = 0) -> tuple[int, int]:
        """Print control-coded ``data`` starting at ``row``, ``column``.

        Output beyond the screen edges is clipped. Returns the final print
        position as ``(row, column)``.
        """
        codes = data.encode("latin-1") if isinstance(data, str) else bytes(data)
        attr: int | None = None
        repeats: list[list[int]] = []
        i = 0
        while i < len(codes):
            code = codes[i]
            i += 1
            if code >= 0x20:
                if 0 <= row < self.height and 0 <= column < self.width:
                    cell = self._cells[row][column]
                    cell.char = code
                    if attr is not None:
                        cell.attr = attr
                column += 1
            elif code == Code.END:
                break
            elif code == Code.NEWLINE:
                row += 1
                column = 0
            elif code == Code.HOME:
                row = column = 0
            elif code == Code.LEFT:
                column -= 1
            elif code == Code.RIGHT:
                column += 1
            elif code == Code.UP:
                row -= 1
            elif code == Code.DOWN:
                row += 1
            elif code == Code.ATTRIBUTE:
                attr = self._operand(codes, i)
                i += 1
            elif code == Code.AT:
                row = self._operand(codes, i)
                column = self._operand(codes, i + 1)
                i += 2
            elif code == Code.REPEAT:
                count = self._operand(codes, i)
                i += 1
                if count == 0:
                    raise ValueError("repeat count must be positive")
                repeats.append([i, count])
            elif code == Code.END_REPEAT:
                if not repeats:
                    raise ValueError("end of repeat without a matching start")
                top = repeats[-1]
                top[1] -= 1
                if top[1] > 0:
                    i = top[0]
                else:
                    repeats.pop()
            else:
                raise ValueError(f"unsupported control code 0x{code:02x}")
        return row, column

    @staticmethod
    def _operand(codes: bytes, index: int) -> int:
        if index >= len(codes):
            raise ValueError("control code is missing its operand")
        return codes[index]

    def cell(self, row: int, column: int) -> Cell:
        """Return a copy of the cell at ``row``, ``column``."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"cell ({row}, {column}) is off the screen")
        return replace(self._cells[row][column])

    def row_text(self, row: int) -> str:
        """Return the characters of one row as a string."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} is off the screen")
        return "".join(chr(cell.char) for cell in self._cells[row])


@dataclass(frozen=True)
class FullscreenImage:
    """A screen picture: tile patterns plus the print string that lays them out."""

    tiles_base: int
    tiles_length: int
    tiles: bytes
    ptiles: bytes

    def __post_init__(self) -> None:
        if self.tiles_length < 0 or self.tiles_base < 0:
            raise ValueError("tile base and length must not be negative")
        if self.tiles_base + self.tiles_length > 0x100:
            raise ValueError("tile codes would not fit a byte")
        if len(self.tiles) < self.tiles_length * TILE_BYTES:
            raise ValueError("not enough tile data for the given length")

    def tile_patterns(self) -> Iterator[tuple[int, bytes]]:
        """Yield ``(code, pattern)`` for each tile of the image."""
        for offset in range(self.tiles_length):
            start = offset * TILE_BYTES
            yield self.tiles_base + offset, bytes(self.tiles[start:start + TILE_BYTES])
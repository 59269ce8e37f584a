import pytest

from zxinterceptor.screen import (
    INK_BLACK,
    PAPER_WHITE,
    SCREEN_COLUMNS,
    SCREEN_ROWS,
    FullscreenImage,
    TileScreen,
)


def test_new_screen_is_blank():
    screen = TileScreen()
    assert (screen.width, screen.height) == (SCREEN_COLUMNS, SCREEN_ROWS)
    assert screen.row_text(0) == " " * SCREEN_COLUMNS
    assert screen.cell(5, 5).attr == INK_BLACK | PAPER_WHITE


def test_print_places_text_at_position():
    screen = TileScreen()
    screen.print_string("AB", 2, 3)
    assert screen.row_text(2)[3:5] == "AB"
    assert screen.row_text(1).strip() == ""


def test_repeat_block():
    screen = TileScreen()
    screen.print_string(bytes([0x0E, 3, ord("A"), 0x0F]))
    assert screen.row_text(0).rstrip() == "A" * 3


def test_attribute_code_colours_following_cells():
    screen = TileScreen()
    screen.print_string(bytes([ord("Y"), 0x14, 0x47, ord("X")]))
    assert screen.cell(0, 0).attr == INK_BLACK | PAPER_WHITE
    assert screen.cell(0, 1).attr == 0x47


def test_newline_returns_to_left_edge():
    screen = TileScreen()
    screen.print_string(b"A\rB", 0, 4)
    assert screen.cell(0, 4).char == ord("A")
    assert screen.cell(1, 0).char == ord("B")


def test_text_past_right_edge_is_clipped():
    screen = TileScreen()
    screen.print_string("ABC", 0, SCREEN_COLUMNS - 1)
    assert screen.row_text(0)[-1] == "A"
    assert screen.row_text(1).strip() == ""


def test_terminator_stops_printing():
    screen = TileScreen()
    screen.print_string(b"A\x00B")
    assert screen.row_text(0).rstrip() == "A"


def test_unmatched_end_repeat_is_rejected():
    with pytest.raises(ValueError):
        TileScreen().print_string(bytes([0x0F]))


def test_missing_operand_is_rejected():
    with pytest.raises(ValueError):
        TileScreen().print_string(bytes([0x14]))


def test_define_and_read_tile():
    screen = TileScreen()
    screen.define_tile(128, bytes(range(8)))
    assert screen.tile(128) == bytes(range(8))


def test_tile_pattern_must_be_eight_bytes():
    with pytest.raises(ValueError):
        TileScreen().define_tile(128, b"\x00\x01")


def test_undefined_tile_raises():
    with pytest.raises(KeyError):
        TileScreen().tile(200)


def test_clear_fills_screen():
    screen = TileScreen()
    screen.print_string("HELLO")
    screen.clear(0x47, "X")
    assert screen.row_text(0) == "X" * SCREEN_COLUMNS
    assert screen.cell(SCREEN_ROWS - 1, 0).attr == 0x47


def test_cell_off_screen_raises():
    with pytest.raises(IndexError):
        TileScreen().cell(SCREEN_ROWS, 0)


def test_fullscreen_image_tile_patterns():
    image = FullscreenImage(128, 2, bytes(range(16)), b"\x00")
    assert list(image.tile_patterns()) == [(128, bytes(range(8))), (129, bytes(range(8, 16)))]


def test_fullscreen_image_rejects_short_tile_data():
    with pytest.raises(ValueError):
        FullscreenImage(128, 3, bytes(16), b"\x00")
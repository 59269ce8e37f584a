import pytest

from zxinterceptor.gameobject import (
    HIDDEN_Y,
    INK_ATTR_MASK,
    OFFSCREEN_COLUMN,
    GameObject,
    Sprite,
    make_game_object,
)
from zxinterceptor.screen import INK_BLUE


def test_factory_sets_position_and_colour():
    obj = make_game_object(10, 20, "mine")
    assert (obj.x, obj.y) == (10, 20)
    assert obj.graphic == "mine"
    assert obj.sprite.attr == INK_BLUE
    assert obj.sprite.attr_mask == INK_ATTR_MASK
    assert obj.reference_count == 0


def test_release_after_single_retain_deletes_sprite():
    obj = make_game_object(0, 0, None)
    obj.retain()
    assert obj.release() is True
    assert obj.sprite.deleted
    assert obj.sprite.x == OFFSCREEN_COLUMN * 8


def test_release_keeps_object_while_referenced():
    obj = make_game_object(0, 0, None)
    obj.retain()
    obj.retain()
    assert obj.release() is False
    assert obj.reference_count == 1
    assert not obj.sprite.deleted


def test_release_from_zero_wraps_and_keeps_object():
    obj = make_game_object(0, 0, None)
    assert obj.release() is False
    assert obj.reference_count == 255


def test_release_after_delete_raises():
    obj = make_game_object(0, 0, None)
    obj.retain()
    obj.release()
    with pytest.raises(RuntimeError):
        obj.release()


def test_hide_and_show_round_trip():
    obj = make_game_object(40, 60, None)
    obj.hide()
    assert obj.is_hidden()
    assert obj.y == HIDDEN_Y
    obj.show()
    assert (obj.x, obj.y) == (40, 60)
    assert not obj.is_hidden()


def test_positions_wrap_like_bytes():
    obj = GameObject(Sprite(), None)
    obj.x = 300
    obj.y = -4
    assert obj.x == 300 - 256
    assert obj.y == 256 - 4
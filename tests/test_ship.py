import pytest

from zxinterceptor.input import Key, ScriptedKeyboard
from zxinterceptor.renderer import Renderer
from zxinterceptor.ship import InterceptorController
from zxinterceptor.sound import Speaker, Tone


@pytest.fixture
def parts():
    renderer = Renderer()
    keyboard = ScriptedKeyboard()
    speaker = Speaker()
    ship = InterceptorController(renderer, keyboard, speaker)
    return renderer, keyboard, speaker, ship


def test_initial_state(parts):
    renderer, _, _, ship = parts
    assert ship.bullet.is_hidden()
    assert not ship.interceptor.is_hidden()
    assert ship.interceptor.reference_count == 2
    assert ship.bullet.reference_count == 2
    assert renderer.game_objects[0] is ship.interceptor
    assert renderer.game_objects[1] is ship.bullet


def test_moves_down(parts):
    _, keyboard, _, ship = parts
    keyboard.press(Key.S)
    ship.step()
    assert ship.interceptor.y == 4


def test_cannot_move_above_top(parts):
    _, keyboard, _, ship = parts
    keyboard.press(Key.W)
    ship.step()
    assert ship.interceptor.y == 0


def test_moves_up(parts):
    _, keyboard, _, ship = parts
    ship.interceptor.y = 40
    keyboard.press(Key.W)
    ship.step()
    assert ship.interceptor.y == 36


def test_stops_at_bottom(parts):
    _, keyboard, _, ship = parts
    ship.interceptor.y = 160
    keyboard.press(Key.S)
    ship.step()
    assert ship.interceptor.y == 160


def test_fire_launches_bullet(parts):
    _, keyboard, speaker, ship = parts
    ship.interceptor.y = 40
    keyboard.press(Key.SPACE)
    ship.step()
    assert ship.is_bullet_should_fly
    assert ship.bullet.x == 8
    assert ship.bullet.y == 40
    assert not ship.bullet.is_hidden()
    assert speaker.played == [Tone(6, 200)]


def test_bullet_keeps_flying_without_fire(parts):
    _, keyboard, speaker, ship = parts
    keyboard.press(Key.SPACE)
    ship.step()
    keyboard.release(Key.SPACE)
    ship.step()
    assert ship.bullet.x == 16
    assert len(speaker.played) == 1


def test_bullet_resets_past_right_edge(parts):
    _, _, _, ship = parts
    ship.bullet.show()
    ship.bullet.x = 248
    ship.step()
    assert ship.bullet.is_hidden()
    assert ship.bullet.x == 0


def test_idle_bullet_stays(parts):
    _, _, speaker, ship = parts
    ship.step()
    assert not ship.is_bullet_should_fly
    assert ship.bullet.is_hidden()
    assert speaker.played == []


def test_close_deletes_bullet_and_frees_slots(parts):
    renderer, _, _, ship = parts
    ship.close()
    assert ship.bullet.sprite.deleted
    assert ship.interceptor.sprite.deleted
    assert renderer.game_objects[:2] == [None, None]
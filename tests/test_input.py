import pytest

from zxinterceptor.input import InputController, Key, ScriptedKeyboard


def test_press_and_release():
    keyboard = ScriptedKeyboard()
    keyboard.press(Key.W, "s")
    assert keyboard.is_pressed(Key.S)
    keyboard.release("w")
    assert not keyboard.is_pressed(Key.W)
    assert keyboard.is_pressed("s")


def test_unknown_key_is_rejected():
    with pytest.raises(ValueError):
        ScriptedKeyboard().press("q")


def test_wait_no_key_releases_everything():
    keyboard = ScriptedKeyboard([Key.SPACE, Key.W])
    keyboard.wait_no_key()
    assert not keyboard.is_pressed(Key.SPACE)
    assert not keyboard.is_pressed(Key.W)
    assert keyboard.no_key_waits == 1


def test_wait_key_is_counted():
    keyboard = ScriptedKeyboard()
    keyboard.wait_key()
    keyboard.wait_key()
    assert keyboard.key_waits == 2


def test_controller_starts_released():
    controller = InputController(ScriptedKeyboard([Key.W]))
    assert not (controller.is_up_pressed or controller.is_down_pressed or controller.is_fire_pressed)


def test_up_wins_over_down():
    controller = InputController(ScriptedKeyboard([Key.W, Key.S]))
    controller.step()
    assert controller.is_up_pressed
    assert not controller.is_down_pressed


def test_down_and_fire_together():
    controller = InputController(ScriptedKeyboard([Key.S, Key.SPACE]))
    controller.step()
    assert controller.is_down_pressed
    assert controller.is_fire_pressed
    assert not controller.is_up_pressed


def test_step_resets_previous_frame():
    keyboard = ScriptedKeyboard([Key.SPACE])
    controller = InputController(keyboard)
    controller.step()
    keyboard.release(Key.SPACE)
    controller.step()
    assert not controller.is_fire_pressed
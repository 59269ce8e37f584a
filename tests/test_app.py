from zxinterceptor.app import Game, MainController, main
from zxinterceptor.ingame import InGameStateController
from zxinterceptor.input import ScriptedKeyboard
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource
from zxinterceptor.screens import GameOverStateController


def test_main_controller_passes_score_and_switches_state():
    renderer = Renderer()
    in_game = InGameStateController(renderer)
    game_over = GameOverStateController(in_game.state_controller, renderer)
    controller = MainController(game_over)
    controller.in_game_state_controller_did_finish_with_score(in_game, 500)
    assert game_over.score == 500
    assert in_game.state_controller.next_state_controller is game_over.state_controller


def test_game_starts_on_title_screen():
    game = Game(rng=RandomSource(1))
    assert game.state_machine.is_running
    assert game.state_machine.state_controller is game.title_screen_state_controller.state_controller


def test_first_step_moves_to_game():
    keyboard = ScriptedKeyboard()
    game = Game(keyboard, RandomSource(1))
    game.step()
    assert keyboard.key_waits == 1
    assert game.state_machine.state_controller is game.in_game_state_controller.state_controller


def test_run_returns_step_count():
    game = Game(rng=RandomSource(2))
    assert game.run(3) == 3
    assert game.in_game_state_controller.is_started


def test_stress_game_reaches_game_over_and_restarts():
    game = Game(rng=RandomSource(1), stress_test=True)
    game_over_state = game.game_over_state_controller.state_controller
    reached = False
    for _ in range(500):
        game.step()
        if game.state_machine.state_controller is game_over_state:
            reached = True
            break
    assert reached
    assert not game.in_game_state_controller.is_started
    assert game.game_over_state_controller.score == game.in_game_state_controller.score

    game.step()
    assert game.state_machine.state_controller is game.in_game_state_controller.state_controller
    game.step()
    assert game.in_game_state_controller.is_started
    assert game.in_game_state_controller.state_controller.next_state_controller in (
        None,
        game_over_state,
    )


def test_main_prints_the_screen(capsys):
    assert main(["--steps", "3", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 24
    assert all(len(line) == 32 for line in lines)
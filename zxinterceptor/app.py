"""Wires the screens together and runs the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from zxinterceptor.ingame import InGameStateController
from zxinterceptor.input import Key, ScriptedKeyboard
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource
from zxinterceptor.screens import GameOverStateController, TitleScreenStateController
from zxinterceptor.sound import Speaker
from zxinterceptor.statemachine import StateMachine


class MainController:
    """Passes the final score of a game on to the game-over screen."""

    def __init__(self, game_over_state_controller: GameOverStateController) -> None:
        self.game_over_state_controller = game_over_state_controller

    def in_game_state_controller_did_finish_with_score(
        self, in_game_state_controller: InGameStateController, score: int
    ) -> None:
        game_over = self.game_over_state_controller
        game_over.score = score
        in_game_state_controller.state_controller.next_state_controller = (
            game_over.state_controller
        )


class Game:
    """Title screen, then games and game-over screens in turn."""

    def __init__(
        self,
        keyboard: ScriptedKeyboard | None = None,
        rng: RandomSource | None = None,
        speaker: Speaker | None = None,
        stress_test: bool = False,
    ) -> None:
        self.keyboard = keyboard if keyboard is not None else ScriptedKeyboard()
        self.rng = rng if rng is not None else RandomSource()
        self.speaker = speaker if speaker is not None else Speaker()
        self.renderer = Renderer()

        self.in_game_state_controller = InGameStateController(
            self.renderer,
            self.keyboard,
            self.rng,
            self.speaker,
            self._in_game_finished,
            stress_test,
        )
        self.title_screen_state_controller = TitleScreenStateController(
            self.in_game_state_controller.state_controller,
            self.renderer,
            self.keyboard,
            stress_test,
        )
        self.game_over_state_controller = GameOverStateController(
            self.in_game_state_controller.state_controller,
            self.renderer,
            self.keyboard,
            0,
            stress_test,
        )
        self.state_machine = StateMachine()
        self.state_machine.start_with_controller(self.title_screen_state_controller.state_controller)
        self.main_controller = MainController(self.game_over_state_controller)

    def _in_game_finished(self, in_game: InGameStateController, score: int) -> None:
        self.main_controller.in_game_state_controller_did_finish_with_score(in_game, score)

    def step(self) -> None:
        self.state_machine.step()

    def run(self, max_steps: int | None = None) -> int:
        """Step while the machine runs, at most ``max_steps`` times; return the count."""
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must not be negative")
        steps = 0
        while self.state_machine.is_running and (max_steps is None or steps < max_steps):
            self.step()
            steps += 1
        return steps


_HOLD_KEYS = {"w": Key.W, "s": Key.S, "space": Key.SPACE}


def _printable(row: str) -> str:
    return "".join("#" if ord(char) >= 0x80 else char for char in row)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="zxinterceptor", description="Run the game headless.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--steps", type=int, default=500, help="number of frames to run")
    parser.add_argument("--stress-test", action="store_true", help="take random damage")
    parser.add_argument(
        "--hold", action="append", choices=sorted(_HOLD_KEYS), default=[], help="key to hold"
    )
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")

    keyboard = ScriptedKeyboard(_HOLD_KEYS[name] for name in args.hold)
    game = Game(keyboard, RandomSource(args.seed), Speaker(), args.stress_test)
    game.run(args.steps)

    screen = game.renderer.screen
    for row in range(screen.height):
        sys.stdout.write(_printable(screen.row_text(row)) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Screens as state controllers, run one step at a time by a state machine."""

from __future__ import annotations

from collections.abc import Callable


class StateController:
    """One screen of the game: a step function and the controller to run next."""

    def __init__(
        self,
        step_function: Callable[[], None] | None = None,
        next_state_controller: StateController | None = None,
    ) -> None:
        self.step_function = step_function
        self.next_state_controller = next_state_controller

    def step(self) -> None:
        if self.step_function is None:
            return
        self.step_function()


class StateMachine:
    """Steps the current controller and then moves on to its successor, if any."""

    def __init__(self) -> None:
        self.is_running = False
        self.state_controller: StateController | None = None

    def start_with_controller(self, state_controller: StateController) -> None:
        self.is_running = True
        self.state_controller = state_controller

    def step(self) -> None:
        current = self.state_controller
        if current is None:
            return
        current.step()
        if current.next_state_controller is not None:
            self.state_controller = current.next_state_controller
"""Base class of the screens the game moves between."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any

from .inputmanager import InputManager


class StateID(IntEnum):
    NULL = 0
    EXIT = 1
    POP = 2
    PLAY = 3
    MENU = 4
    PAUSE = 5


class State(ABC):
    """A screen of the game, driven once per frame by run()."""

    def __init__(self, game: Any, input_manager: InputManager) -> None:
        self.game = game
        self.input_manager = input_manager
        self.next_state_id = StateID.NULL

    @abstractmethod
    def initialize(self) -> None:
        """Load what the state needs."""

    @abstractmethod
    def exit(self) -> None:
        """Release what the state holds."""

    @abstractmethod
    def run(self) -> None:
        """Process one frame."""

    @abstractmethod
    def update(self) -> None:
        """Handle pending input."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the state."""

    def pop_state(self) -> None:
        self.game.pop_state()

    def push_state(self, state: State) -> None:
        self.game.push_state(state)

    def change_state(self, state: State) -> None:
        self.game.change_state(state)
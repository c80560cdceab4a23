"""The window, the stack of screens and the transitions between them."""

from __future__ import annotations

import os

import pygame

from . import config
from .config import LOGICAL_WINDOW_HEIGHT, LOGICAL_WINDOW_WIDTH, WINDOW_TITLE
from .gamestate import GameState
from .inputmanager import InputManager
from .menustate import MenuState
from .optionsstate import OptionsState
from .pausedstate import PausedState
from .renderer import Renderer
from .state import State, StateID


class Game:
    """Owns the window and runs whichever state is on top of the stack."""

    def __init__(self, input_manager: InputManager | None = None) -> None:
        self.input_manager = input_manager if input_manager is not None else InputManager()
        self.renderer: Renderer | None = None
        self.window: pygame.Surface | None = None
        self.states: list[State] = []
        self.main_menu_state: MenuState | None = None
        self.play_state: GameState | None = None
        self.options_state: OptionsState | None = None
        self.paused_state: PausedState | None = None

    def initialize(self) -> None:
        """Open the window, load fonts and show the main menu."""
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.init()
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            self.window = pygame.display.set_mode(config.settings.window_size())
        except pygame.error as exc:
            raise RuntimeError(f"could not create window: {exc}") from exc

        # The logical resolution never changes; only the window is scaled.
        self.renderer = Renderer(pygame.Surface((LOGICAL_WINDOW_WIDTH, LOGICAL_WINDOW_HEIGHT)))
        self.renderer.load_fonts()
        self.renderer.clear_screen()

        self.main_menu_state = MenuState(self, self.input_manager)
        self.main_menu_state.initialize()
        self.push_state(self.main_menu_state)

    def exit(self) -> None:
        """Release every state on the stack and close the window."""
        for state in self.states:
            state.exit()
        self.states.clear()
        self.window = None
        pygame.quit()

    def run(self) -> None:
        """Run one frame of the state on top."""
        if self.states:
            self.states[-1].run()

    def pop_state(self) -> None:
        self.states.pop()

    def push_state(self, state: State) -> None:
        self.states.append(state)

    def change_state(self, state: State) -> None:
        self.pop_state()
        self.push_state(state)

    def push_new_game(self) -> None:
        if self.play_state is not None:
            self.play_state.exit()
        self.play_state = GameState(self, self.input_manager)
        self.play_state.initialize()
        self.push_state(self.play_state)

    def push_options(self) -> None:
        if self.options_state is not None:
            self.options_state.exit()
        self.options_state = OptionsState(self, self.input_manager)
        self.options_state.initialize()
        self.push_state(self.options_state)

    def push_paused(self) -> None:
        if self.paused_state is not None:
            self.paused_state.exit()
        self.paused_state = PausedState(self, self.input_manager)
        self.paused_state.initialize()
        self.push_state(self.paused_state)

    def go_back(self) -> None:
        self.pop_state()

    def go_double_back(self) -> None:
        self.pop_state()
        self.pop_state()

    def is_game_exiting(self) -> bool:
        """True when no state is left or the top state asks to exit."""
        if not self.states:
            return True
        return self.states[-1].next_state_id == StateID.EXIT

    def set_window_scale(self, scale: float) -> None:
        """Change the resolution scaling and resize the window if it is open."""
        config.settings.resolution_scaling = scale
        if self.window is not None and pygame.display.get_init():
            self.window = pygame.display.set_mode(config.settings.window_size())
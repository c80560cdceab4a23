"""The main menu shown when the game starts."""

from __future__ import annotations

from .button import Button
from .config import (
    DEFAULT_TEXT_COLOR,
    LOGICAL_WINDOW_WIDTH,
    TRANSPARENCY_ALPHA,
    asset_path,
)
from .inputmanager import Action
from .state import State, StateID
from .texture import Texture

_BUTTON_X = (LOGICAL_WINDOW_WIDTH - 80) // 2


class MenuState(State):
    """Play, Options and Exit buttons under the title."""

    def initialize(self) -> None:
        renderer = self.game.renderer
        self.index = 0
        self.buttons: list[Button] = []
        self.title_text = Texture(renderer)
        self.title_text.load_from_text("Pixeltetris!", renderer.big_font, DEFAULT_TEXT_COLOR)
        for name, callback, y in (
            ("button-play.png", self.game.push_new_game, 130),
            ("button-options.png", self.game.push_options, 180),
            ("button-exit.png", self.game.go_back, 230),
        ):
            self.add_button(Button(renderer, asset_path(name), callback, _BUTTON_X, y))

    def exit(self) -> None:
        for button in self.buttons:
            button.texture.free()
        self.buttons.clear()
        self.title_text.free()

    def run(self) -> None:
        self.update()
        self.draw()

    def update(self) -> None:
        manager = self.input_manager
        while manager.poll_action():
            if manager.game_exiting:
                self.next_state_id = StateID.EXIT
                break
            action = manager.action
            if action is Action.SELECT:
                self.buttons[self.index].callback()
            elif action is Action.MOVE_UP and self.index > 0:
                self.index -= 1
            elif action is Action.MOVE_DOWN and self.index < len(self.buttons) - 1:
                self.index += 1

    def draw(self) -> None:
        renderer = self.game.renderer
        renderer.clear_screen()
        for button in self.buttons:
            button.draw()
        self.title_text.render_centered(LOGICAL_WINDOW_WIDTH // 2, 50)
        selected = self.buttons[self.index]
        renderer.draw_highlight(
            selected.x, selected.y, selected.width, selected.height, TRANSPARENCY_ALPHA - 20
        )
        renderer.update_screen()

    def add_button(self, button: Button) -> None:
        self.buttons.append(button)
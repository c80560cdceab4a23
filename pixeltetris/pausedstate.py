"""The pause dialog shown over a running game."""

from __future__ import annotations

from .button import Button
from .config import (
    LOGICAL_WINDOW_HEIGHT,
    LOGICAL_WINDOW_WIDTH,
    TRANSPARENCY_ALPHA,
    asset_path,
)
from .inputmanager import Action
from .state import State, StateID
from .texture import Texture


class PausedState(State):
    """Quit and Resume buttons inside a frame; Resume is selected first."""

    def initialize(self) -> None:
        renderer = self.game.renderer
        self.index = 1
        self.paused_frame = Texture(renderer)
        self.paused_frame.load_from_image(asset_path("paused-frame.png"))
        self.buttons: list[Button] = [
            Button(renderer, asset_path("button-quit.png"), self.game.go_double_back, 230, 190),
            Button(renderer, asset_path("button-resume.png"), self.game.go_back, 330, 190),
        ]

    def exit(self) -> None:
        for button in self.buttons:
            button.texture.free()
        self.buttons.clear()
        self.paused_frame.free()

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
            elif action is Action.MOVE_LEFT and self.index > 0:
                self.index -= 1
            elif action is Action.MOVE_RIGHT and self.index < len(self.buttons) - 1:
                self.index += 1

    def draw(self) -> None:
        renderer = self.game.renderer
        self.paused_frame.render_centered(LOGICAL_WINDOW_WIDTH // 2, LOGICAL_WINDOW_HEIGHT // 2)
        for button in self.buttons:
            button.draw()
        selected = self.buttons[self.index]
        renderer.draw_highlight(
            selected.x, selected.y, selected.width, selected.height, TRANSPARENCY_ALPHA - 20
        )
        renderer.update_screen()
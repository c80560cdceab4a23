"""The options screen: resolution scaling and the ghost piece."""

from __future__ import annotations

from enum import Enum, auto

from . import config
from .button import Button
from .config import (
    AVAILABLE_RESOLUTION_SCALINGS,
    DEFAULT_TEXT_COLOR,
    LOGICAL_WINDOW_HEIGHT,
    LOGICAL_WINDOW_WIDTH,
    TRANSPARENCY_ALPHA,
    asset_path,
)
from .inputmanager import Action
from .state import State, StateID
from .texture import Texture

_OK_INDEX = 2
_OK_BUTTON_X = (LOGICAL_WINDOW_WIDTH - 80) // 2
_OK_BUTTON_Y = 280


class SettingChange(Enum):
    """Direction in which a setting is changed."""

    LEFT = auto()
    RIGHT = auto()


class OptionsState(State):
    """Rows for resolution and ghost block, followed by an OK button."""

    def initialize(self) -> None:
        renderer = self.game.renderer
        self.index = 0
        self.resolution_scaling_index = config.settings.scaling_index()

        self.title_text = self._text("Options", renderer.big_font)
        self.resolution_setting_text = self._text("Resolution", renderer.medium_font)
        self.resolution_text = Texture(renderer)
        self.ghost_block_setting_text = self._text("Ghost Block", renderer.medium_font)

        self.left_arrow = self._image("arrow-left.png")
        self.right_arrow = self._image("arrow-right.png")
        self.texture_on_on = self._image("button-on-on.png")
        self.texture_on_off = self._image("button-on-off.png")
        self.texture_off_on = self._image("button-off-on.png")
        self.texture_off_off = self._image("button-off-off.png")
        self.ok_button = Button(
            renderer, asset_path("button-ok.png"), self.game.go_back, _OK_BUTTON_X, _OK_BUTTON_Y
        )

    def _text(self, text: str, font) -> Texture:
        texture = Texture(self.game.renderer)
        texture.load_from_text(text, font, DEFAULT_TEXT_COLOR)
        return texture

    def _image(self, name: str) -> Texture:
        texture = Texture(self.game.renderer)
        texture.load_from_image(asset_path(name))
        return texture

    def exit(self) -> None:
        for texture in (
            self.title_text,
            self.resolution_setting_text,
            self.resolution_text,
            self.ghost_block_setting_text,
            self.left_arrow,
            self.right_arrow,
            self.texture_on_on,
            self.texture_on_off,
            self.texture_off_on,
            self.texture_off_off,
            self.ok_button.texture,
        ):
            texture.free()

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
            if action is Action.BACK:
                self.game.pop_state()
            elif action is Action.SELECT:
                if self.index == _OK_INDEX:
                    self.game.pop_state()
            elif action is Action.MOVE_UP:
                if self.index > 0:
                    self.index -= 1
            elif action is Action.MOVE_DOWN:
                if self.index < _OK_INDEX:
                    self.index += 1
            elif action in (Action.MOVE_LEFT, Action.MOVE_RIGHT):
                change = SettingChange.LEFT if action is Action.MOVE_LEFT else SettingChange.RIGHT
                if self.index == 0:
                    self.change_resolution(change)
                elif self.index == 1:
                    self.change_ghost_block(change)

    def draw(self) -> None:
        renderer = self.game.renderer
        renderer.clear_screen()

        self.title_text.render_centered(LOGICAL_WINDOW_WIDTH // 2, 50)
        self.resolution_setting_text.render(50, 100)
        self.ghost_block_setting_text.render(50, 180)

        scaling = config.settings.resolution_scaling
        resolution = (
            f"{int(LOGICAL_WINDOW_WIDTH * scaling)} x {int(LOGICAL_WINDOW_HEIGHT * scaling)}"
        )
        self.resolution_text.load_from_text(resolution, renderer.medium_font, DEFAULT_TEXT_COLOR)
        self.resolution_text.render(400 + int((200 - self.resolution_text.width) / 2), 101)

        self.left_arrow.render(383, 105)
        self.right_arrow.render(590, 105)
        if config.settings.ghost_piece_enabled:
            self.texture_off_off.render(400, 188)
            self.texture_on_on.render(510, 188)
        else:
            self.texture_off_on.render(400, 188)
            self.texture_on_off.render(510, 188)
        self.ok_button.draw()

        alpha = TRANSPARENCY_ALPHA - 20
        if self.index < _OK_INDEX:
            height = self.resolution_setting_text.height + 5
            renderer.draw_highlight(0, 100 + self.index * 80, LOGICAL_WINDOW_WIDTH, height, alpha)
        else:
            button = self.ok_button
            renderer.draw_highlight(button.x, button.y, button.width, button.height, alpha)

        renderer.update_screen()

    def change_resolution(self, change: SettingChange) -> None:
        """Step the resolution scaling one position left or right, within bounds."""
        if change is SettingChange.LEFT and self.resolution_scaling_index > 0:
            self.resolution_scaling_index -= 1
        elif (
            change is SettingChange.RIGHT
            and self.resolution_scaling_index < len(AVAILABLE_RESOLUTION_SCALINGS) - 1
        ):
            self.resolution_scaling_index += 1
        else:
            return
        self.game.set_window_scale(AVAILABLE_RESOLUTION_SCALINGS[self.resolution_scaling_index])

    def change_ghost_block(self, change: SettingChange) -> None:
        """Left turns the ghost block off, right turns it on."""
        config.settings.ghost_piece_enabled = change is SettingChange.RIGHT
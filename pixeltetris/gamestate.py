"""The screen on which a Tetris game is played."""

from __future__ import annotations

import dataclasses
import math
import random
from collections.abc import Callable, Iterator
from enum import Enum, auto
from typing import Any

import pygame

from . import config
from .config import (
    BLOCK_SIZE,
    DEFAULT_TEXT_COLOR,
    FRAME_SPRITE_SIZE,
    FRAME_WIDTH,
    HEIGHT_TO_PLAYFIELD,
    HOLD_BOX_X,
    HOLD_BOX_Y,
    LOGICAL_WINDOW_HEIGHT,
    LOGICAL_WINDOW_WIDTH,
    NEXT_BOX_X,
    NEXT_BOX_Y,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
    TRANSPARENCY_ALPHA,
    TRUE_PLAYFIELD_HEIGHT,
    WIDTH_TO_PLAYFIELD,
    asset_path,
)
from .inputmanager import Action, InputManager
from .piece import Piece
from .session import GameSession
from .state import State, StateID
from .texture import Texture

COUNTDOWN_MS = 3000
_HIDDEN_ROWS = PLAYFIELD_HEIGHT - TRUE_PLAYFIELD_HEIGHT

# Background colour of each stage; the last one is kept for every later stage.
STAGE_COLORS: tuple[tuple[int, int, int], ...] = (
    (249, 230, 207),
    (100, 149, 237),
    (186, 85, 211),
    (255, 160, 122),
    (144, 238, 144),
    (135, 206, 250),
    (255, 182, 193),
    (255, 255, 224),
    (119, 136, 153),
    (72, 61, 139),
)


def stage_color(stage: int) -> tuple[int, int, int]:
    """Background colour used for a stage."""
    index = min(max(stage - 1, 0), len(STAGE_COLORS) - 1)
    return STAGE_COLORS[index]


class GamePhase(Enum):
    STARTED = auto()
    PLAYING = auto()
    FINISHED = auto()


class GameState(State):
    """Countdown, play and game-over screens of one game."""

    def __init__(
        self,
        game: Any,
        input_manager: InputManager,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(game, input_manager)
        self.rng = rng
        self.clock: Callable[[], int] = clock or pygame.time.get_ticks
        self.phase = GamePhase.STARTED
        self.session: GameSession | None = None
        self.game_just_started = True
        self._time_snap = 0
        self.countdown_text: Texture | None = None
        self.gameover_text: Texture | None = None
        self.sprites: Texture | None = None
        self.frame: Texture | None = None
        self.stage_text: Texture | None = None
        self.score_text: Texture | None = None
        self._sprite_clips = [pygame.Rect(16 * i, 0, 16, 16) for i in range(7)]
        self._frame_clips = [
            pygame.Rect(FRAME_SPRITE_SIZE * i, 0, FRAME_SPRITE_SIZE, FRAME_SPRITE_SIZE)
            for i in range(4)
        ]

    @property
    def renderer(self):
        return self.game.renderer

    def initialize(self) -> None:
        self.phase = GamePhase.STARTED
        self.session = GameSession(self.rng)
        renderer = self.renderer
        self.stage_text = Texture(renderer)
        self.score_text = Texture(renderer)
        self.countdown_text = Texture(renderer)
        self.gameover_text = Texture(renderer)
        self.gameover_text.load_from_text("Game Over!", renderer.medium_font, DEFAULT_TEXT_COLOR)
        self.sprites = Texture(renderer)
        self.sprites.load_from_image(asset_path("tetrominoSprites.png"))
        self.frame = Texture(renderer)
        self.frame.load_from_image(asset_path("playfieldFrame.png"))
        self.game_just_started = True

    def exit(self) -> None:
        for texture in (
            self.countdown_text,
            self.gameover_text,
            self.sprites,
            self.frame,
            self.stage_text,
            self.score_text,
        ):
            if texture is not None:
                texture.free()

    def _actions(self) -> Iterator[Action]:
        while self.input_manager.poll_action():
            yield self.input_manager.action

    def run(self) -> None:
        if self.phase is GamePhase.STARTED:
            self._run_countdown()
        elif self.phase is GamePhase.PLAYING:
            self._run_playing()
        else:
            self._run_finished()

    def _run_countdown(self) -> None:
        if self.game_just_started:
            self._time_snap = self.clock()
            self.game_just_started = False
        elapsed = self.clock() - self._time_snap
        if elapsed >= COUNTDOWN_MS:
            self.phase = GamePhase.PLAYING
            self._time_snap = self.clock()
            return
        for action in self._actions():
            if self.input_manager.game_exiting:
                self.next_state_id = StateID.EXIT
                break
            if action is Action.BACK:
                self.game.pop_state()
                break
        self.draw()
        seconds_left = math.ceil((COUNTDOWN_MS - elapsed) / 1000)
        self.countdown_text.load_from_text(
            str(seconds_left), self.renderer.medium_font, DEFAULT_TEXT_COLOR
        )
        self.renderer.render_texture(
            self.countdown_text, LOGICAL_WINDOW_WIDTH // 2, LOGICAL_WINDOW_HEIGHT // 2
        )
        self.renderer.update_screen()

    def _run_playing(self) -> None:
        if self.input_manager.game_exiting:
            self.next_state_id = StateID.EXIT
            return
        if self.session.is_game_over():
            self.phase = GamePhase.FINISHED
            return
        for action in self._actions():
            if self.input_manager.game_exiting:
                break
            if action is Action.BACK:
                self.game.pop_state()
                break
            self._handle(action)
        if self.clock() - self._time_snap >= round(self.session.drop_interval * 1000):
            self.session.move_piece_down()
            self._time_snap = self.clock()
        self.draw()
        self.renderer.update_screen()

    def _run_finished(self) -> None:
        if self.input_manager.game_exiting:
            self.next_state_id = StateID.EXIT
            return
        for action in self._actions():
            if action is Action.BACK:
                self.game.pop_state()
                break
        self.draw()
        self.renderer.render_texture(
            self.gameover_text, 3 + LOGICAL_WINDOW_WIDTH // 2, LOGICAL_WINDOW_HEIGHT // 2
        )
        self.renderer.update_screen()

    def _handle(self, action: Action) -> None:
        if action is Action.PAUSE:
            self.phase = GamePhase.STARTED
            self.game_just_started = True
            self.game.push_paused()
        else:
            self.session.handle_action(action)

    def update(self) -> None:
        """Input is handled inside run(); nothing to do here."""

    def draw(self) -> None:
        session = self.session
        self.renderer.set_background_color(*stage_color(session.stage))
        self.renderer.clear_screen()
        self._draw_board()
        self._draw_cells(session.current_piece, *self._playfield_origin())
        if not session.is_game_over() and config.settings.ghost_piece_enabled:
            self.sprites.set_alpha(TRANSPARENCY_ALPHA)
            self._draw_cells(session.ghost_piece(), *self._playfield_origin())
            self.sprites.set_alpha(255)
        if session.hold_piece is not None:
            self._draw_cells(
                dataclasses.replace(session.hold_piece, r=0, c=0), HOLD_BOX_X, HOLD_BOX_Y
            )
        self._draw_cells(
            dataclasses.replace(session.next_piece, r=0, c=0), NEXT_BOX_X, NEXT_BOX_Y
        )

    @staticmethod
    def _playfield_origin() -> tuple[int, int]:
        return WIDTH_TO_PLAYFIELD, HEIGHT_TO_PLAYFIELD - _HIDDEN_ROWS * BLOCK_SIZE

    def _draw_cells(self, piece: Piece, left: int, top: int) -> None:
        clip = self._sprite_clips[piece.piece_type]
        for row, col in piece.cells():
            self.sprites.render(left + col * BLOCK_SIZE, top + row * BLOCK_SIZE, clip)

    def _draw_board(self) -> None:
        frame, clips = self.frame, self._frame_clips
        right_x = WIDTH_TO_PLAYFIELD + BLOCK_SIZE * PLAYFIELD_WIDTH
        bottom_y = HEIGHT_TO_PLAYFIELD + BLOCK_SIZE * TRUE_PLAYFIELD_HEIGHT
        for i in range(2 * TRUE_PLAYFIELD_HEIGHT):
            y = HEIGHT_TO_PLAYFIELD + i * FRAME_SPRITE_SIZE
            frame.render(WIDTH_TO_PLAYFIELD - FRAME_SPRITE_SIZE, y, clips[0])
            frame.render(right_x - (FRAME_SPRITE_SIZE - FRAME_WIDTH), y, clips[0])
        corner_y = bottom_y - (FRAME_SPRITE_SIZE - FRAME_WIDTH)
        frame.render(WIDTH_TO_PLAYFIELD - FRAME_SPRITE_SIZE, corner_y, clips[2])
        frame.render(right_x, corner_y, clips[3])
        for i in range(2 * PLAYFIELD_WIDTH):
            frame.render(WIDTH_TO_PLAYFIELD + i * FRAME_SPRITE_SIZE, bottom_y, clips[1])

        board = self.session.board
        for row in range(PLAYFIELD_HEIGHT):
            for col in range(PLAYFIELD_WIDTH):
                if not board.is_block_free(row, col):
                    self.sprites.render(
                        WIDTH_TO_PLAYFIELD + col * BLOCK_SIZE,
                        HEIGHT_TO_PLAYFIELD + (row - _HIDDEN_ROWS) * BLOCK_SIZE,
                        self._sprite_clips[board.get_tetromino(row, col)],
                    )

        font = self.renderer.medium_font
        self.stage_text.load_from_text(f"Stage: {self.session.stage}", font, DEFAULT_TEXT_COLOR)
        self.stage_text.render(20, 20)
        self.score_text.load_from_text(f"Score: {self.session.score}", font, DEFAULT_TEXT_COLOR)
        self.score_text.render(20, 50)
"""The rules of a single Tetris game, independent of drawing and timing."""

from __future__ import annotations

import dataclasses
import logging
import random

from .board import Board
from .config import PLAYFIELD_WIDTH
from .inputmanager import Action
from .piece import Piece

logger = logging.getLogger(__name__)

_LINE_POINTS = {1: 100, 2: 300, 3: 500}
_START_DROP_INTERVAL = 0.8
_MIN_DROP_INTERVAL = 0.1
_DROP_INTERVAL_STEP = 0.1


def points_for_lines(count: int) -> int:
    """Score awarded for clearing a number of lines at once."""
    if count <= 0:
        return 0
    return _LINE_POINTS.get(count, 800)


class GameSession:
    """Board, falling piece, next and held pieces, score and stage."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.board = Board()
        self.stage = 1
        self.lines_cleared = 0
        self.drop_interval = _START_DROP_INTERVAL
        self.score = 0
        self.hold_piece: Piece | None = None
        self.hold_block_used = False
        self.next_piece = self._random_piece()
        self.current_piece = Piece(self.next_piece.piece_type)
        self.create_new_piece()

    def _random_piece(self) -> Piece:
        # Pieces always start flat.
        return Piece(self.rng.randint(0, 6), 0)

    def _spawn(self, piece: Piece) -> Piece:
        piece.r = piece.initial_offset_r()
        piece.c = PLAYFIELD_WIDTH // 2 + piece.initial_offset_c()
        steps = 3 if piece.piece_type > 1 else 2
        for _ in range(steps):
            piece.r += 1
            if not self.board.is_position_legal(piece):
                piece.r -= 1
        return piece

    def create_new_piece(self) -> None:
        """Make the next piece current and draw a new next piece."""
        self.current_piece = self._spawn(
            Piece(self.next_piece.piece_type, self.next_piece.rotation)
        )
        self.next_piece = self._random_piece()

    def check_state(self) -> None:
        """Lock the current piece, clear lines, score, and spawn the next piece."""
        self.board.store_piece(self.current_piece)
        cleared = self.board.clear_full_lines()
        self.score += points_for_lines(cleared)
        self.lines_cleared += cleared
        while self.lines_cleared >= 1:
            self.stage += 1
            self.lines_cleared -= 1
            self.drop_interval = max(
                _MIN_DROP_INTERVAL, round(self.drop_interval - _DROP_INTERVAL_STEP, 6)
            )
            logger.info(
                "Stage up: now at stage %d, drop interval %.1fs", self.stage, self.drop_interval
            )
        if not self.board.is_game_over():
            self.create_new_piece()
        self.hold_block_used = False

    def _try_shift(self, dr: int, dc: int) -> bool:
        self.current_piece.r += dr
        self.current_piece.c += dc
        if self.board.is_position_legal(self.current_piece):
            return True
        self.current_piece.r -= dr
        self.current_piece.c -= dc
        return False

    def move_piece_down(self) -> None:
        """Move the piece one row down, locking it if it cannot move."""
        if not self._try_shift(1, 0):
            self.check_state()

    def _rotate(self) -> None:
        piece = self.current_piece
        piece.rotation = (piece.rotation + 1) % 4
        if not self.board.is_position_legal(piece):
            piece.rotation = (piece.rotation + 3) % 4

    def _drop(self) -> None:
        piece = self.current_piece
        while self.board.is_position_legal(piece):
            piece.r += 1
        piece.r -= 1
        self.check_state()

    def hold(self) -> None:
        """Put the current piece on hold, swapping with a held one once per lock."""
        if self.hold_piece is None:
            self.hold_piece = dataclasses.replace(self.current_piece, rotation=0)
            self.create_new_piece()
            self.hold_block_used = True
        elif not self.hold_block_used:
            held = self.hold_piece
            self.hold_piece = dataclasses.replace(self.current_piece, rotation=0)
            self.current_piece = self._spawn(dataclasses.replace(held, rotation=0))
            self.hold_block_used = True

    def handle_action(self, action: Action) -> None:
        """Apply a movement action to the current piece; others are ignored."""
        if action is Action.MOVE_DOWN:
            self.move_piece_down()
        elif action is Action.MOVE_LEFT:
            self._try_shift(0, -1)
        elif action is Action.MOVE_RIGHT:
            self._try_shift(0, 1)
        elif action is Action.DROP:
            self._drop()
        elif action in (Action.MOVE_UP, Action.ROTATE):
            self._rotate()
        elif action is Action.HOLD:
            self.hold()

    def ghost_piece(self) -> Piece:
        """Where the current piece would land if dropped."""
        ghost = dataclasses.replace(self.current_piece)
        while self.board.is_position_legal(ghost):
            ghost.r += 1
        ghost.r -= 1
        return ghost

    def is_game_over(self) -> bool:
        return self.board.is_game_over()
"""The playfield grid on which pieces are stored."""

from __future__ import annotations

import dataclasses
from enum import IntEnum

from .config import PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH
from .piece import Piece


class BlockStatus(IntEnum):
    EMPTY = 0
    I = 1  # noqa: E741
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


def _empty_row() -> list[BlockStatus]:
    return [BlockStatus.EMPTY] * PLAYFIELD_WIDTH


class Board:
    """A PLAYFIELD_HEIGHT x PLAYFIELD_WIDTH grid; row 0 is the top."""

    def __init__(self) -> None:
        self._grid: list[list[BlockStatus]] = [_empty_row() for _ in range(PLAYFIELD_HEIGHT)]
        self.pieces: list[Piece] = []

    def get_tetromino(self, r: int, c: int) -> int:
        """Type of the tetromino stored at a block, or -1 if it is empty."""
        return int(self._grid[r][c]) - 1

    def is_block_free(self, r: int, c: int) -> bool:
        return self._grid[r][c] == BlockStatus.EMPTY

    def is_position_legal(self, piece: Piece) -> bool:
        """True if the piece lies inside the walls and floor and overlaps nothing."""
        for row, col in piece.cells():
            if col < 0 or col >= PLAYFIELD_WIDTH or row >= PLAYFIELD_HEIGHT:
                return False
            if row >= 0 and not self.is_block_free(row, col):
                return False
        return True

    def store_piece(self, piece: Piece) -> None:
        """Write the piece's blocks into the grid; blocks above the top are dropped."""
        cells = list(piece.cells())
        for row, col in cells:
            if col < 0 or col >= PLAYFIELD_WIDTH or row >= PLAYFIELD_HEIGHT:
                raise ValueError(f"block ({row}, {col}) lies outside the board")
        status = BlockStatus(piece.piece_type + 1)
        for row, col in cells:
            if row >= 0:
                self._grid[row][col] = status
        self.pieces.append(dataclasses.replace(piece))

    def clear_full_lines(self) -> int:
        """Remove every full row, moving the rows above down; return how many."""
        kept = [row for row in self._grid if BlockStatus.EMPTY in row]
        cleared = PLAYFIELD_HEIGHT - len(kept)
        self._grid = [_empty_row() for _ in range(cleared)] + kept
        return cleared

    def is_game_over(self) -> bool:
        """True if anything occupies the two spawn rows above the playfield."""
        return any(status != BlockStatus.EMPTY for row in self._grid[:2] for status in row)
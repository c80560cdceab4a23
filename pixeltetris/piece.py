"""A tetromino placed at a position on the board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .config import MATRIX_BLOCKS
from .tetrominoes import initial_offset, shape


@dataclass
class Piece:
    """A tetromino type in a rotation, with its matrix's top-left at (r, c)."""

    piece_type: int
    rotation: int = 0
    r: int = 0
    c: int = 0

    def block_type(self, r_offset: int, c_offset: int) -> int:
        """Block value at an offset inside the piece matrix (0 means empty)."""
        return shape(self.piece_type, self.rotation)[r_offset][c_offset]

    def initial_offset_r(self) -> int:
        return initial_offset(self.piece_type, self.rotation)[0]

    def initial_offset_c(self) -> int:
        return initial_offset(self.piece_type, self.rotation)[1]

    def cells(self) -> Iterator[tuple[int, int]]:
        """Absolute (row, column) of every filled block of the piece."""
        matrix = shape(self.piece_type, self.rotation)
        for row in range(MATRIX_BLOCKS):
            for col in range(MATRIX_BLOCKS):
                if matrix[row][col]:
                    yield self.r + row, self.c + col
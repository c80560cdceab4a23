import dataclasses

import pytest

from pixeltetris.piece import Piece
from pixeltetris.tetrominoes import TetrominoType, initial_offset, shape


@pytest.mark.parametrize("piece_type", list(TetrominoType))
@pytest.mark.parametrize("rotation", range(4))
def test_block_type_matches_shape(piece_type, rotation):
    piece = Piece(piece_type, rotation)
    matrix = shape(piece_type, rotation)
    assert [[piece.block_type(r, c) for c in range(5)] for r in range(5)] == [list(row) for row in matrix]


def test_initial_offsets():
    piece = Piece(TetrominoType.I, 1)
    assert (piece.initial_offset_r(), piece.initial_offset_c()) == initial_offset(TetrominoType.I, 1)


def test_cells_shift_with_position():
    base = list(Piece(TetrominoType.L, 3).cells())
    moved = list(Piece(TetrominoType.L, 3, r=5, c=-1).cells())
    assert len(base) == 4
    assert moved == [(r + 5, c - 1) for r, c in base]


def test_cells_include_pivot():
    piece = Piece(TetrominoType.Z, 0, r=3, c=4)
    assert (3 + 2, 4 + 2) in set(piece.cells())


def test_copy_is_independent():
    original = Piece(TetrominoType.T, 2, r=1, c=1)
    copy = dataclasses.replace(original)
    copy.r += 3
    copy.rotation = 0
    assert original.r == 1
    assert original.rotation == 2


def test_invalid_rotation_raises():
    with pytest.raises(ValueError):
        Piece(TetrominoType.T, 5).block_type(0, 0)
import pytest

from pixeltetris.tetrominoes import TetrominoType, initial_offset, shape

ALL = [(t, r) for t in TetrominoType for r in range(4)]


@pytest.mark.parametrize("piece_type,rotation", ALL)
def test_every_shape_has_four_blocks_and_center_pivot(piece_type, rotation):
    matrix = shape(piece_type, rotation)
    assert len(matrix) == 5
    assert all(len(row) == 5 for row in matrix)
    assert sum(1 for row in matrix for v in row if v) == 4
    assert matrix[2][2] == 2
    assert sum(1 for row in matrix for v in row if v == 2) == 1


def test_o_piece_rotations_identical():
    shapes = {shape(TetrominoType.O, r) for r in range(4)}
    assert len(shapes) == 1


def test_t_piece_rotations_distinct():
    shapes = {shape(TetrominoType.T, r) for r in range(4)}
    assert len(shapes) == 4


def test_initial_offsets_from_table():
    assert initial_offset(TetrominoType.I, 1) == (0, -3)
    assert initial_offset(TetrominoType.T, 0) == (-2, -3)
    assert initial_offset(TetrominoType.S, 2) == (-2, -2)


@pytest.mark.parametrize("args", [(7, 0), (-1, 0), (0, 4), (0, -1)])
def test_invalid_arguments_raise(args):
    with pytest.raises(ValueError):
        shape(*args)
    with pytest.raises(ValueError):
        initial_offset(*args)
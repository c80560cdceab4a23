import pytest

from pixeltetris.board import BlockStatus, Board
from pixeltetris.config import PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH
from pixeltetris.piece import Piece
from pixeltetris.tetrominoes import TetrominoType


def all_cells():
    return [(r, c) for r in range(PLAYFIELD_HEIGHT) for c in range(PLAYFIELD_WIDTH)]


def test_new_board_is_empty():
    board = Board()
    assert all(board.is_block_free(r, c) for r, c in all_cells())
    assert all(board.get_tetromino(r, c) == -1 for r, c in all_cells())
    assert board.is_game_over() is False


def test_walls():
    board = Board()
    assert board.is_position_legal(Piece(TetrominoType.I, 0, r=10, c=-1))
    assert not board.is_position_legal(Piece(TetrominoType.I, 0, r=10, c=-2))
    assert board.is_position_legal(Piece(TetrominoType.I, 0, r=10, c=5))
    assert not board.is_position_legal(Piece(TetrominoType.I, 0, r=10, c=6))


def test_floor_and_above_top():
    board = Board()
    assert board.is_position_legal(Piece(TetrominoType.I, 0, r=19, c=0))
    assert not board.is_position_legal(Piece(TetrominoType.I, 0, r=20, c=0))
    assert board.is_position_legal(Piece(TetrominoType.I, 0, r=-3, c=0))


def test_store_piece_marks_cells():
    board = Board()
    piece = Piece(TetrominoType.T, 0, r=10, c=2)
    board.store_piece(piece)
    cells = set(piece.cells())
    for r, c in all_cells():
        if (r, c) in cells:
            assert board.get_tetromino(r, c) == TetrominoType.T
        else:
            assert board.is_block_free(r, c)
    assert board.pieces == [piece]
    assert not board.is_position_legal(piece)


def test_stored_pieces_are_copies():
    board = Board()
    piece = Piece(TetrominoType.O, 0, r=10, c=0)
    board.store_piece(piece)
    piece.r = 0
    assert board.pieces[0].r == 10


def test_clear_single_line_shifts_rows_down():
    board = Board()
    board.store_piece(Piece(TetrominoType.I, 0, r=19, c=-1))
    board.store_piece(Piece(TetrominoType.I, 0, r=19, c=3))
    board.store_piece(Piece(TetrominoType.O, 0, r=18, c=6))
    assert board.clear_full_lines() == 1
    bottom = PLAYFIELD_HEIGHT - 1
    occupied = {(r, c) for r, c in all_cells() if not board.is_block_free(r, c)}
    assert occupied == {(bottom, 8), (bottom, 9)}
    assert board.get_tetromino(bottom, 8) == TetrominoType.O


def test_clear_two_lines_empties_board():
    board = Board()
    for k in range(PLAYFIELD_WIDTH // 2):
        board.store_piece(Piece(TetrominoType.O, 0, r=18, c=-2 + 2 * k))
    assert board.clear_full_lines() == 2
    assert all(board.is_block_free(r, c) for r, c in all_cells())
    assert board.clear_full_lines() == 0


def test_game_over_when_spawn_rows_filled():
    board = Board()
    board.store_piece(Piece(TetrominoType.I, 0, r=-1, c=0))
    assert board.is_game_over() is True


def test_store_outside_raises():
    board = Board()
    with pytest.raises(ValueError):
        board.store_piece(Piece(TetrominoType.I, 0, r=10, c=-2))
    assert board.pieces == []


def test_block_status_matches_piece_types():
    for piece_type in TetrominoType:
        assert BlockStatus(piece_type + 1).name == piece_type.name
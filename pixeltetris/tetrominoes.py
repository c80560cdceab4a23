"""Shapes and spawn offsets of the seven tetrominoes."""

from __future__ import annotations

from enum import IntEnum

Matrix = tuple[tuple[int, ...], ...]


class TetrominoType(IntEnum):
    I = 0  # noqa: E741
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


def _m(*rows: str) -> Matrix:
    return tuple(tuple(int(ch) for ch in row) for row in rows)


# For each piece, four rotations of a 5x5 matrix; 2 marks the pivot block.
_SHAPES: tuple[tuple[Matrix, ...], ...] = (
    (  # I
        _m("00000", "00000", "01211", "00000", "00000"),
        _m("00000", "00100", "00200", "00100", "00100"),
        _m("00000", "00000", "11210", "00000", "00000"),
        _m("00100", "00100", "00200", "00100", "00000"),
    ),
    (  # O
        _m("00000", "00000", "00210", "00110", "00000"),
        _m("00000", "00000", "00210", "00110", "00000"),
        _m("00000", "00000", "00210", "00110", "00000"),
        _m("00000", "00000", "00210", "00110", "00000"),
    ),
    (  # T
        _m("00000", "00100", "01210", "00000", "00000"),
        _m("00000", "00100", "00210", "00100", "00000"),
        _m("00000", "00000", "01210", "00100", "00000"),
        _m("00000", "00100", "01200", "00100", "00000"),
    ),
    (  # S
        _m("00000", "00110", "01200", "00000", "00000"),
        _m("00000", "00100", "00210", "00010", "00000"),
        _m("00000", "00000", "00210", "01100", "00000"),
        _m("00000", "01000", "01200", "00100", "00000"),
    ),
    (  # Z
        _m("00000", "01100", "00210", "00000", "00000"),
        _m("00000", "00010", "00210", "00100", "00000"),
        _m("00000", "00000", "01200", "00110", "00000"),
        _m("00000", "00100", "01200", "01000", "00000"),
    ),
    (  # J
        _m("00000", "01000", "01210", "00000", "00000"),
        _m("00000", "00110", "00200", "00100", "00000"),
        _m("00000", "00000", "01210", "00010", "00000"),
        _m("00000", "00100", "00200", "01100", "00000"),
    ),
    (  # L
        _m("00000", "00010", "01210", "00000", "00000"),
        _m("00000", "00100", "00200", "00110", "00000"),
        _m("00000", "00000", "01210", "01000", "00000"),
        _m("00000", "01100", "00200", "00100", "00000"),
    ),
)

# Row and column offsets applied when a piece spawns.
_INITIAL_OFFSETS: tuple[tuple[tuple[int, int], ...], ...] = (
    ((-2, -3), (0, -3), (-2, -2), (0, -3)),  # I
    ((-2, -3), (-2, -3), (-2, -2), (-2, -3)),  # O
    ((-2, -3), (-2, -3), (-2, -3), (-2, -3)),  # T
    ((-2, -3), (-2, -3), (-2, -2), (-2, -3)),  # S
    ((-2, -3), (-2, -3), (-2, -3), (-2, -3)),  # Z
    ((-2, -3), (-2, -3), (-2, -3), (-2, -3)),  # J
    ((-2, -3), (-2, -3), (-2, -3), (-2, -3)),  # L
)


def _check(piece_type: int, rotation: int) -> None:
    if not 0 <= piece_type < len(TetrominoType):
        raise ValueError(f"invalid piece type: {piece_type}")
    if not 0 <= rotation < 4:
        raise ValueError(f"invalid rotation: {rotation}")


def shape(piece_type: int, rotation: int) -> Matrix:
    """The 5x5 block matrix of a piece in a rotation."""
    _check(piece_type, rotation)
    return _SHAPES[piece_type][rotation]


def initial_offset(piece_type: int, rotation: int) -> tuple[int, int]:
    """The (row, column) spawn offset of a piece in a rotation."""
    _check(piece_type, rotation)
    return _INITIAL_OFFSETS[piece_type][rotation]
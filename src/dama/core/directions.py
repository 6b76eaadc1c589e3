"""Diagonal direction vectors per piece rank and side."""

from __future__ import annotations

from dama.core.enums import Rank, Side
from dama.core.piece import Piece

Direction = tuple[int, int]  # (d_row, d_col)

DIAGONALS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_MAN_DIRS: dict[Side, tuple[Direction, ...]] = {
    Side.WHITE: ((-1, -1), (-1, 1)),
    Side.BLACK: ((1, -1), (1, 1)),
}


def directions_for(piece: Piece) -> tuple[Direction, ...]:
    """Movement and capture directions: forward diagonals for a man, all four for a king."""
    if piece.rank == Rank.KING:
        return DIAGONALS
    return _MAN_DIRS[piece.side]

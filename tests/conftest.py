"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.piece import Piece
from dama.core.position import Position
from dama.core.types import parse_square

PositionFactory = Callable[..., Position]


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from ``{"c3": "w", "d4": "B", ...}``."""

    def _make(pieces: dict[str, str], side: Side = Side.WHITE) -> Position:
        board = Board()
        for name, char in pieces.items():
            square = parse_square(name)
            assert square is not None, f"bad square name {name!r}"
            board[square] = Piece.from_char(char)
        return Position(board, side)

    return _make

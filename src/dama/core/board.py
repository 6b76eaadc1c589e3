"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from dama.core.enums import Side
from dama.core.piece import Piece
from dama.core.types import BOARD_SIZE, Square, is_on_board, is_playable

_HOME_ROWS: dict[Side, range] = {
    Side.BLACK: range(0, 3),
    Side.WHITE: range(5, 8),
}


class Board:
    """Mutable 8×8 grid of optional pieces.

    Only range and parity are enforced here; rule logic lives in
    :mod:`dama.core.rules` and :mod:`dama.core.move_generator`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and not is_playable(sq):
            raise ValueError(f"Pieces may only stand on playable squares, got {sq!r}")
        if piece is None and not is_on_board(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        self._grid[sq[0]][sq[1]] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not is_on_board(sq):
            return None
        return self._grid[sq[0]][sq[1]]

    @staticmethod
    def is_on_board(sq: Square) -> bool:
        return is_on_board(sq)

    def is_empty(self, sq: Square) -> bool:
        """On the board and unoccupied."""
        return is_on_board(sq) and self._grid[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, row by row."""
        return [
            Square(row, col)
            for row, cells in enumerate(self._grid)
            for col, piece in enumerate(cells)
            if piece is not None and piece.side == side
        ]

    def count(self, side: Side) -> int:
        return sum(
            1
            for cells in self._grid
            for piece in cells
            if piece is not None and piece.side == side
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [cells.copy() for cells in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: 12 men per side on the dark squares."""
        b = cls()
        for side, rows in _HOME_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    if (row + col) % 2 == 1:
                        b[Square(row, col)] = Piece(side)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            line = [str(p) if p else "." for p in cells]
            rows.append(f"{BOARD_SIZE - row} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

"""Square coordinate type and helpers.

Board layout (row 0 at the top, Black's home side)::

    row 0  ->  rank 8
    ...
    row 7  ->  rank 1

Columns 0–7 map to files a–h. Only squares with odd ``row + col`` are
playable, e.g. ``c3`` is ``Square(5, 2)``.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class Square(NamedTuple):
    """Board coordinate ``(row, col)``."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self) if is_on_board(self) else f"({self.row},{self.col})"


def is_on_board(sq: object) -> bool:
    """Whether *sq* is a ``(row, col)`` pair inside the 8×8 grid.

    Never raises, so arbitrary caller input can be checked safely.
    """
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    if type(row) is not int or type(col) is not int:
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable(sq: object) -> bool:
    """On-board dark square (odd parity)."""
    return is_on_board(sq) and (sq[0] + sq[1]) % 2 == 1  # type: ignore[index]


def playable_squares() -> list[Square]:
    """All 32 playable squares, row by row."""
    return [
        Square(row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if (row + col) % 2 == 1
    ]


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(5, 2)`` → ``'c3'``."""
    return _FILES[sq.col] + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square | None:
    """Parse a square name, e.g. ``'c3'`` → ``Square(5, 2)``.

    Returns ``None`` for malformed names (wrong length, bad file or rank).
    """
    if not isinstance(name, str) or len(name) != 2:
        return None
    file_ch, rank_ch = name[0], name[1]
    if file_ch not in _FILES or rank_ch not in _RANKS:
        return None
    return Square(BOARD_SIZE - int(rank_ch), _FILES.index(file_ch))


# ── Named playable squares ──────────────────────────────────────────────────

B8, D8, F8, H8 = (Square(0, c) for c in (1, 3, 5, 7))
A7, C7, E7, G7 = (Square(1, c) for c in (0, 2, 4, 6))
B6, D6, F6, H6 = (Square(2, c) for c in (1, 3, 5, 7))
A5, C5, E5, G5 = (Square(3, c) for c in (0, 2, 4, 6))
B4, D4, F4, H4 = (Square(4, c) for c in (1, 3, 5, 7))
A3, C3, E3, G3 = (Square(5, c) for c in (0, 2, 4, 6))
B2, D2, F2, H2 = (Square(6, c) for c in (1, 3, 5, 7))
A1, C1, E1, G1 = (Square(7, c) for c in (0, 2, 4, 6))

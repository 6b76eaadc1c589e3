"""Position strings: a FEN-like board encoding for draughts.

Eight ranks from row 0 (rank 8) down to row 7 (rank 1) separated by ``/``;
``w``/``b`` are men, ``W``/``B`` kings, digits count empty squares. The side
to move (``w`` or ``b``) follows after a space.
"""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.piece import Piece
from dama.core.position import Position
from dama.core.types import BOARD_SIZE, Square, is_playable, square_name

STARTING_FEN = "1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/w1w1w1w1/1w1w1w1w/w1w1w1w1 w"


def position_from_fen(fen: str) -> Position:
    """Parse a position string into a :class:`Position`."""
    parts = fen.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid position string (need 2 fields): {fen!r}")

    placement, side_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid position board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid rank width: {fen!r}")
                sq = Square(row, col)
                if not is_playable(sq):
                    raise ValueError(
                        f"Piece on a light square {square_name(sq)}: {fen!r}"
                    )
                board[sq] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Side.WHITE
    elif side_part == "b":
        side = Side.BLACK
    else:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}")

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to a position string."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = pos.board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = "w" if pos.side_to_move == Side.WHITE else "b"
    return f"{'/'.join(rows)} {side_str}"

"""Plain-text board rendering.

Always renders from a :class:`GameSnapshot`, so the picture cannot drift
from the engine state it was taken from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dama.core.types import BOARD_SIZE, Square

if TYPE_CHECKING:
    from dama.game.state import GameSnapshot

_FILES_HEADER = "    a b c d e f g h"
_RULE = "   -----------------"
_EMPTY_DARK = "·"
_LIGHT = " "


def render_board(snapshot: GameSnapshot, *, unicode_pieces: bool = False) -> str:
    """Board diagram with file/rank labels, side to move and winner.

    Men are ``w``/``b``, kings ``W``/``B`` (or draughts glyphs with
    *unicode_pieces*).
    """
    lines = [_FILES_HEADER, _RULE]
    for row in range(BOARD_SIZE):
        rank_label = BOARD_SIZE - row
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            if (row + col) % 2 == 0:
                cells.append(_LIGHT)
                continue
            piece = snapshot.piece_at(Square(row, col))
            if piece is None:
                cells.append(_EMPTY_DARK)
            else:
                cells.append(piece.symbol if unicode_pieces else str(piece))
        lines.append(f"{rank_label} | {' '.join(cells)} | {rank_label}")
    lines.append(_RULE)
    lines.append(_FILES_HEADER)

    if snapshot.winner is not None:
        lines.append(f"Winner: {snapshot.winner}")
    else:
        lines.append(f"To move: {snapshot.side_to_move}")
    return "\n".join(lines)

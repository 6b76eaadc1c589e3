"""Move text: ``c3-d4`` for a step, ``e3xg5xe7`` for a capture chain."""

from __future__ import annotations

from dama.core.move import Move
from dama.core.types import Square, is_on_board, parse_square

_STEP_SEP = "-"
_JUMP_SEP = "x"


def move_to_text(move: Move) -> str:
    """Notation for *move*; chains list every landing square.

    A move naming anything but on-board squares falls back to its ``repr``.
    """
    if not all(is_on_board(sq) for sq in (move.from_sq, move.to_sq, *move.captures)):
        return repr(move)
    if not move.captures:
        return f"{Square(*move.from_sq)}{_STEP_SEP}{Square(*move.to_sq)}"
    return _JUMP_SEP.join(str(sq) for sq in move.path)


def parse_move(text: str) -> Move | None:
    """Parse move text, rebuilding the captured squares from the landing path.

    Returns ``None`` for malformed text. The result is not checked for
    legality; that is the job of :class:`dama.core.rules.Rules`.
    """
    if not isinstance(text, str):
        return None
    text = text.strip().lower()

    if _STEP_SEP in text:
        names = text.split(_STEP_SEP)
        if len(names) != 2:
            return None
        squares = [parse_square(name) for name in names]
        if squares[0] is None or squares[1] is None:
            return None
        return Move(squares[0], squares[1])

    names = text.split(_JUMP_SEP)
    if len(names) < 2:
        return None
    path: list[Square] = []
    for name in names:
        sq = parse_square(name)
        if sq is None:
            return None
        path.append(sq)

    captures: list[Square] = []
    for prev, landing in zip(path, path[1:]):
        d_row = landing.row - prev.row
        d_col = landing.col - prev.col
        if abs(d_row) != 2 or abs(d_col) != 2:
            return None
        captures.append(Square(prev.row + d_row // 2, prev.col + d_col // 2))
    return Move(path[0], path[-1], tuple(captures))

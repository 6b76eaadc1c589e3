"""Capture-chain resolution: one turn may jump several pieces in a row.

A jump leaves the moving piece on a new square from which it must keep
jumping while it can. Only maximal chains are legal moves, so a chain that
could be extended is never offered on its own.

The piece jumps with the rank it started the turn with. Promotion is applied
after the whole chain by :meth:`dama.core.position.Position.make_move`; a man
that lands on the far row mid-chain has no forward jump left, so its chain
ends there.
"""

from __future__ import annotations

from dama.core.board import Board
from dama.core.directions import directions_for
from dama.core.move import Move
from dama.core.piece import Piece
from dama.core.types import Square


def resolve_captures(board: Board, origin: Square) -> list[Move]:
    """All maximal capture chains for the piece on *origin*.

    Works on a scratch copy: the mover is lifted off *origin* and every
    jumped piece is removed as it is taken, so no piece is captured twice and
    squares the mover already left never block it.
    """
    piece = board.piece_at(origin)
    if piece is None:
        return []

    scratch = board.copy()
    scratch[origin] = None
    chains: list[Move] = []
    _extend(scratch, piece, Square(*origin), Square(*origin), [], chains)
    return chains


def has_capture(board: Board, origin: Square) -> bool:
    """Whether the piece on *origin* has at least one jump."""
    piece = board.piece_at(origin)
    if piece is None:
        return False
    return any(_jump(board, piece, Square(*origin), d) for d in directions_for(piece))


def _jump(
    board: Board, piece: Piece, current: Square, direction: tuple[int, int]
) -> tuple[Square, Square] | None:
    """``(captured, landing)`` for a jump in *direction*, if one exists."""
    d_row, d_col = direction
    over = current.offset(d_row, d_col)
    victim = board.piece_at(over)
    if victim is None or victim.side == piece.side:
        return None
    landing = current.offset(2 * d_row, 2 * d_col)
    if not board.is_empty(landing):
        return None
    return over, landing


def _extend(
    board: Board,
    piece: Piece,
    origin: Square,
    current: Square,
    captured: list[Square],
    chains: list[Move],
) -> None:
    extended = False
    for direction in directions_for(piece):
        jump = _jump(board, piece, current, direction)
        if jump is None:
            continue
        over, landing = jump
        victim = board[over]
        board[over] = None
        captured.append(over)
        _extend(board, piece, origin, landing, captured, chains)
        captured.pop()
        board[over] = victim
        extended = True

    if not extended and captured:
        chains.append(Move(origin, current, tuple(captured)))

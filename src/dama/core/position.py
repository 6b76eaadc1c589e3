"""Position: board plus side to move, with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.piece import Piece
from dama.core.rules import Rules
from dama.core.types import Square


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    moved_piece: Piece
    captured: list[tuple[Square, Piece | None]]


class Position:
    """Board + side to move.

    Supports :meth:`make_move` / :meth:`unmake_move` via an internal history
    stack so search code can walk a line and back without copying.
    ``make_move`` does not validate; use :class:`dama.core.rules.Rules` first.
    """

    __slots__ = ("board", "side_to_move", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side = Side.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self._history: list[_PositionState] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*: relocate, remove captured pieces, crown, flip sides."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = [(Square(*sq), self.board[sq]) for sq in move.captures]
        self._history.append(_PositionState(moved_piece=piece, captured=captured))

        self.board[move.from_sq] = None
        for sq, _ in captured:
            self.board[sq] = None

        placed = piece.crowned() if Rules.should_promote(piece, move.to_sq) else piece
        self.board[move.to_sq] = placed

        self.side_to_move = self.side_to_move.opposite

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()
        self.side_to_move = self.side_to_move.opposite

        self.board[move.to_sq] = None
        for sq, victim in state.captured:
            self.board[sq] = victim
        self.board[move.from_sq] = state.moved_piece

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self, *, keep_history: bool = False) -> Position:
        """Deep copy; the undo stack is carried over only with *keep_history*."""
        clone = Position(board=self.board.copy(), side_to_move=self.side_to_move)
        if keep_history:
            clone._history = list(self._history)
        return clone

    @property
    def undo_depth(self) -> int:
        """Number of moves :meth:`unmake_move` can still take back."""
        return len(self._history)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"

"""Legal move generation with the mandatory-capture rule."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.capture_chain import has_capture, resolve_captures
from dama.core.directions import directions_for
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.types import Square


class MoveGenerator:
    """Generates legal moves for either side on a :class:`Board`.

    The board is only read. Capture chains are resolved on scratch copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, side: Side) -> list[Move]:
        """Every capture chain for *side* if any exists, else every simple step."""
        captures = self.generate_captures(side)
        if captures:
            return captures
        return self.generate_simple_moves(side)

    def generate_captures(self, side: Side) -> list[Move]:
        """All maximal capture chains for *side*, over all its pieces."""
        moves: list[Move] = []
        for sq in self._board.pieces(side):
            moves.extend(resolve_captures(self._board, sq))
        return moves

    def generate_simple_moves(self, side: Side) -> list[Move]:
        """All one-square diagonal steps for *side*, ignoring mandatory capture."""
        moves: list[Move] = []
        for sq in self._board.pieces(side):
            self._gen_steps(sq, moves)
        return moves

    def has_captures(self, side: Side) -> bool:
        return any(has_capture(self._board, sq) for sq in self._board.pieces(side))

    def has_legal_moves(self, side: Side) -> bool:
        """Cheaper than generating: any jump or any step is enough."""
        board = self._board
        for sq in board.pieces(side):
            if has_capture(board, sq):
                return True
            piece = board[sq]
            assert piece is not None
            for d_row, d_col in directions_for(piece):
                if board.is_empty(sq.offset(d_row, d_col)):
                    return True
        return False

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*, with mandatory capture applied board-wide."""
        piece = self._board.piece_at(sq)
        if piece is None:
            return []
        return [m for m in self.generate_legal_moves(piece.side) if m.from_sq == sq]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_steps(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        piece = board[sq]
        assert piece is not None
        for d_row, d_col in directions_for(piece):
            to_sq = sq.offset(d_row, d_col)
            if board.is_empty(to_sq):
                moves.append(Move(sq, to_sq))

"""High-level rules: move validation, promotion, game termination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dama.core.enums import GameResult, MoveError, Rank, Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.types import is_on_board, square_name

if TYPE_CHECKING:
    from dama.core.piece import Piece
    from dama.core.position import Position
    from dama.core.types import Square


def promotion_row(side: Side) -> int:
    """Far row where *side*'s men are crowned."""
    return 0 if side == Side.WHITE else 7


_REASONS: dict[MoveError, str] = {
    MoveError.GAME_FINISHED: "The game is already finished",
    MoveError.INVALID_POSITION: "Move names a square outside the board",
    MoveError.NO_PIECE: "There is no piece on the origin square",
    MoveError.WRONG_SIDE: "The piece on the origin square belongs to the opponent",
    MoveError.DESTINATION_OCCUPIED: "The destination square is occupied",
    MoveError.MALFORMED_CHAIN: "Captured squares do not form a chain of diagonal jumps",
    MoveError.CAPTURE_REQUIRED: "A capture is available and must be played",
    MoveError.NOT_LEGAL: "Move is not legal in this position",
}


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of validating or committing a move.

    Truthy on success; otherwise ``error`` names the rejection and
    ``reason`` explains it for humans.
    """

    ok: bool
    error: MoveError | None = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> MoveResult:
        return cls(ok=True)

    @classmethod
    def reject(cls, error: MoveError, detail: str = "") -> MoveResult:
        reason = _REASONS[error]
        if detail:
            reason = f"{reason}: {detail}"
        return cls(ok=False, error=error, reason=reason)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def should_promote(piece: Piece, to_sq: Square) -> bool:
        return piece.rank == Rank.MAN and to_sq[0] == promotion_row(piece.side)

    @staticmethod
    def validate_move(position: Position, move: object) -> MoveResult:
        """Check *move* against the legal moves of the side to move.

        Never raises: malformed input is reported through the result.
        """
        if not isinstance(move, Move):
            return MoveResult.reject(MoveError.INVALID_POSITION, f"not a move: {move!r}")

        squares = (move.from_sq, move.to_sq, *move.captures)
        if not all(is_on_board(sq) for sq in squares):
            return MoveResult.reject(MoveError.INVALID_POSITION)

        board = position.board
        piece = board[move.from_sq]
        if piece is None:
            return MoveResult.reject(MoveError.NO_PIECE, square_name(move.from_sq))

        if piece.side != position.side_to_move:
            return MoveResult.reject(
                MoveError.WRONG_SIDE, f"{position.side_to_move} is to move"
            )

        if move.to_sq != move.from_sq and board[move.to_sq] is not None:
            return MoveResult.reject(
                MoveError.DESTINATION_OCCUPIED, square_name(move.to_sq)
            )

        if move.captures and not Rules._is_jump_chain(move):
            return MoveResult.reject(MoveError.MALFORMED_CHAIN, str(move))

        legal = MoveGenerator(board).generate_legal_moves(position.side_to_move)
        if not move.captures and any(m.is_capture for m in legal):
            return MoveResult.reject(MoveError.CAPTURE_REQUIRED)

        if move not in legal:
            return MoveResult.reject(MoveError.NOT_LEGAL, str(move))

        return MoveResult.success()

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """The side to move loses when it has no legal move."""
        gen = MoveGenerator(position.board)
        if gen.has_legal_moves(position.side_to_move):
            return GameResult.IN_PROGRESS
        return GameResult.win_for(position.side_to_move.opposite)

    # -- Internal -----------------------------------------------------------

    @staticmethod
    def _is_jump_chain(move: Move) -> bool:
        """Each captured square is diagonally adjacent to the square before it,
        every landing is on the board, and the last landing is ``to_sq``."""
        path = move.path
        for prev, cap, landing in zip(path, move.captures, path[1:]):
            if abs(cap[0] - prev[0]) != 1 or abs(cap[1] - prev[1]) != 1:
                return False
            if not is_on_board(landing):
                return False
        return path[-1] == move.to_sq

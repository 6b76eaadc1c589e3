"""Game session: owns the position, history and winner of one game."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from dama.core.board import Board
from dama.core.enums import GameResult, MoveError, Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.notation import (
    STARTING_FEN,
    build_record,
    parse_record,
    position_from_fen,
    position_to_fen,
    result_token,
)
from dama.core.piece import Piece
from dama.core.position import Position
from dama.core.rules import MoveResult, Rules
from dama.core.types import Square
from dama.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Isolated copy of a session at one moment.

    The fields cannot be reassigned, but ``board`` is a private mutable
    copy: changing it never reaches the game it was taken from.
    """

    board: Board
    side_to_move: Side
    result: GameResult
    move_history: tuple[Move, ...]

    @property
    def winner(self) -> Side | None:
        return self.result.winner

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def fen(self) -> str:
        return position_to_fen(Position(self.board, self.side_to_move))

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board.piece_at(sq)


class GameState:
    """A single game: board, side to move, move history and winner.

    :meth:`commit_move` is the only mutator. It validates, applies and
    evaluates the end of the game in one step and reports problems through
    a :class:`MoveResult` instead of raising. Sessions are caller-owned and
    not thread-safe; give each concurrent game its own instance and hand
    search code a :meth:`copy`.
    """

    __slots__ = ("_position", "_history", "_result", "_start_fen")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position.copy() if position is not None else Position()
        self._history: list[Move] = []
        self._start_fen = position_to_fen(self._position)
        self._result = Rules.game_result(self._position)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        """Session starting from a custom position string."""
        return cls(position_from_fen(fen))

    @classmethod
    def replay(cls, moves: Iterable[Move], fen: str | None = None) -> GameState:
        """Rebuild a session by committing *moves* from the start position.

        Raises ``ValueError`` on the first move that does not commit.
        """
        state = cls.from_fen(fen) if fen else cls()
        for ply, move in enumerate(moves, start=1):
            result = state.commit_move(move)
            if not result:
                raise ValueError(f"Cannot replay ply {ply} ({move}): {result.reason}")
        return state

    @classmethod
    def from_record(cls, text: str) -> GameState:
        """Replay a game record produced by :meth:`to_record`."""
        parsed = parse_record(text)
        return cls.replay(parsed.moves, parsed.start_fen)

    # ── Move application ─────────────────────────────────────────────────

    def validate_move(self, move: object) -> MoveResult:
        """Check *move* without applying it."""
        if self.is_game_over:
            return MoveResult.reject(MoveError.GAME_FINISHED)
        return Rules.validate_move(self._position, move)

    def commit_move(self, move: object) -> MoveResult:
        """Validate and apply *move* atomically; nothing changes on rejection."""
        result = self.validate_move(move)
        if not result:
            _LOGGER.debug("Rejected move %r: %s", move, result.reason)
            return result

        assert isinstance(move, Move)
        move = _canonical(move)
        mover = self._position.side_to_move
        self._position.make_move(move)
        self._history.append(move)
        self._result = Rules.game_result(self._position)

        _LOGGER.debug("Ply %d: %s played %s", len(self._history), mover, move)
        if self.is_game_over:
            _LOGGER.info(
                "Game over after %d plies: %s wins", len(self._history), self.winner
            )
        return result

    def undo_last_move(self) -> Move | None:
        """Take back the last committed move; ``None`` when there is none."""
        if not self._history:
            return None
        move = self._history.pop()
        self._position.unmake_move(move)
        self._result = Rules.game_result(self._position)
        _LOGGER.debug("Undid ply %d: %s", len(self._history) + 1, move)
        return move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self._position.side_to_move

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def winner(self) -> Side | None:
        return self._result.winner

    @property
    def phase(self) -> GamePhase:
        if self.is_game_over:
            return GamePhase.FINISHED
        return GamePhase.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    @property
    def move_history(self) -> list[Move]:
        return list(self._history)

    @property
    def ply_count(self) -> int:
        """Number of moves played."""
        return len(self._history)

    @property
    def start_fen(self) -> str:
        return self._start_fen

    @property
    def fen(self) -> str:
        return position_to_fen(self._position)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._position.board.piece_at(sq)

    def legal_moves(self, side: Side | None = None) -> list[Move]:
        """Legal moves for *side* (default: the side to move)."""
        if side is None:
            side = self._position.side_to_move
        return MoveGenerator(self._position.board).generate_legal_moves(side)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self._position.board.copy(),
            side_to_move=self._position.side_to_move,
            result=self._result,
            move_history=tuple(self._history),
        )

    def copy(self) -> GameState:
        """Independent deep copy for speculative play."""
        clone = GameState.__new__(GameState)
        clone._position = self._position.copy(keep_history=True)
        clone._history = list(self._history)
        clone._start_fen = self._start_fen
        clone._result = self._result
        return clone

    def to_record(self, headers: dict[str, str] | None = None) -> str:
        """Serialise history plus start position as a game record."""
        tags = dict(headers or {})
        token = result_token(self._result)
        tags["Result"] = token
        if self._start_fen != STARTING_FEN:
            tags["FEN"] = self._start_fen
        return build_record(tags, self._history, token)


def _canonical(move: Move) -> Move:
    """Same move built from :class:`Square` values, for stored history."""
    return Move(
        Square(*move.from_sq),
        Square(*move.to_sq),
        tuple(Square(*sq) for sq in move.captures),
    )

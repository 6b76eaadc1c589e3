"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Side(IntEnum):
    """Side to move. White moves first and plays up the board (toward row 0)."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's forward step."""
        return -1 if self == Side.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank."""

    MAN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.WHITE_WINS if side == Side.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.WHITE_WINS:
            return Side.WHITE
        if self == GameResult.BLACK_WINS:
            return Side.BLACK
        return None


class MoveError(StrEnum):
    """Reasons a proposed move is rejected."""

    GAME_FINISHED = "game_finished"
    INVALID_POSITION = "invalid_position"
    NO_PIECE = "no_piece"
    WRONG_SIDE = "wrong_side"
    DESTINATION_OCCUPIED = "destination_occupied"
    MALFORMED_CHAIN = "malformed_chain"
    CAPTURE_REQUIRED = "capture_required"
    NOT_LEGAL = "not_legal"

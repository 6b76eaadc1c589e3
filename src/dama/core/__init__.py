"""Core domain layer: pure draughts rules with zero external dependencies.

Quick start::

    from dama.core import MoveGenerator, Position, Side

    pos = Position()
    gen = MoveGenerator(pos.board)
    for move in gen.generate_legal_moves(Side.WHITE):
        print(move)
"""

from dama.core.board import Board
from dama.core.capture_chain import resolve_captures
from dama.core.directions import directions_for
from dama.core.enums import GameResult, MoveError, Rank, Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.notation import (
    STARTING_FEN,
    move_to_text,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from dama.core.piece import Piece
from dama.core.position import Position
from dama.core.rules import MoveResult, Rules, promotion_row
from dama.core.types import (
    Square,
    is_on_board,
    is_playable,
    parse_square,
    playable_squares,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "MoveError",
    "Rank",
    "Side",
    # Types / helpers
    "Square",
    "is_on_board",
    "is_playable",
    "parse_square",
    "playable_squares",
    "square_name",
    "directions_for",
    "promotion_row",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "Rules",
    "resolve_captures",
    # Notation
    "STARTING_FEN",
    "move_to_text",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]

"""Notation package: position strings, move text and game records."""

from dama.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from dama.core.notation.models import ParsedRecord
from dama.core.notation.moves import move_to_text, parse_move
from dama.core.notation.record import (
    build_record,
    game_result_from_token,
    movetext_from_moves,
    parse_record,
    result_token,
)

__all__ = [
    "STARTING_FEN",
    "ParsedRecord",
    "position_from_fen",
    "position_to_fen",
    "move_to_text",
    "parse_move",
    "result_token",
    "game_result_from_token",
    "movetext_from_moves",
    "build_record",
    "parse_record",
]

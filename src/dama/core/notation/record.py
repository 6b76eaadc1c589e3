"""Game records: PGN-style tag pairs plus numbered movetext.

Example::

    [Event "Casual game"]
    [Result "1-0"]

    1. c3-d4 f6-e5 2. d4xf6 g7xe5 1-0
"""

from __future__ import annotations

import re

from dama.core.enums import GameResult
from dama.core.move import Move
from dama.core.notation.models import ParsedRecord
from dama.core.notation.moves import move_to_text, parse_move

_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_RESULT_TOKENS = {"1-0", "0-1", "1/2-1/2", "*"}
_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")
_COMMENT_RE = re.compile(r"\{[^}]*\}")


def result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a record result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def game_result_from_token(token: str) -> GameResult:
    """Convert a record result token to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def movetext_from_moves(moves: list[Move], token: str) -> str:
    """Numbered movetext, e.g. ``1. c3-d4 f6-e5 2. ... 1-0``."""
    parts: list[str] = []
    for ply, move in enumerate(moves):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(move_to_text(move))
    parts.append(token)
    return " ".join(parts)


def build_record(headers: dict[str, str], moves: list[Move], token: str) -> str:
    """Build a single-game record document."""
    if token not in _RESULT_TOKENS:
        raise ValueError(f"Invalid result token: {token!r}")
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(movetext_from_moves(moves, token))
    lines.append("")
    return "\n".join(lines)


def parse_record(text: str) -> ParsedRecord:
    """Parse a single game record into headers, moves and result token."""
    headers: dict[str, str] = {}
    move_lines: list[str] = []
    in_headers = True

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            if in_headers and not headers:
                continue
            in_headers = False
            continue

        if in_headers and line.startswith("["):
            match = _HEADER_RE.match(line)
            if match is None:
                raise ValueError(f"Invalid record header line: {line}")
            key, raw_value = match.groups()
            headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue

        in_headers = False
        move_lines.append(line)

    moves: list[Move] = []
    token = "*"
    movetext = _COMMENT_RE.sub(" ", " ".join(move_lines))
    for item in movetext.split():
        if item in _RESULT_TOKENS:
            token = item
            continue
        if _MOVE_NUMBER_RE.match(item):
            continue
        move = parse_move(item)
        if move is None:
            raise ValueError(f"Invalid move in record: {item!r}")
        moves.append(move)

    header_result = headers.get("Result")
    if token == "*" and header_result in _RESULT_TOKENS:
        token = header_result

    return ParsedRecord(headers=headers, moves=moves, result_token=token)

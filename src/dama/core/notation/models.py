"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.move import Move


@dataclass(slots=True)
class ParsedRecord:
    """Structured game record used by replay and import paths."""

    headers: dict[str, str]
    moves: list[Move]
    result_token: str

    @property
    def start_fen(self) -> str | None:
        """Custom starting position from the ``FEN`` tag, if any."""
        return self.headers.get("FEN")

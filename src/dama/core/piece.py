"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.enums import Rank, Side

# Position-string character ↔ (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "w": (Side.WHITE, Rank.MAN),
    "W": (Side.WHITE, Rank.KING),
    "b": (Side.BLACK, Rank.MAN),
    "B": (Side.BLACK, Rank.KING),
}

_UNICODE: dict[tuple[Side, Rank], str] = {
    (Side.WHITE, Rank.MAN): "⛀",
    (Side.WHITE, Rank.KING): "⛁",
    (Side.BLACK, Rank.MAN): "⛂",
    (Side.BLACK, Rank.KING): "⛃",
}

_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a draughts piece."""

    side: Side
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def crowned(self) -> Piece:
        """The same piece promoted to king (kings stay kings)."""
        if self.rank == Rank.KING:
            return self
        return Piece(self.side, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Position-string character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.side, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its character, e.g. 'B' → black king."""
        try:
            side, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, rank)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛂."""
        return _UNICODE[(self.side, self.rank)]

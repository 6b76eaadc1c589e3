"""Abstract interfaces for the game layer.

High-level GameController depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, StrEnum, auto
from typing import TYPE_CHECKING

from dama.core.enums import Side

if TYPE_CHECKING:
    from dama.core.move import Move
    from dama.game.state import GameSnapshot


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    IN_PROGRESS = auto()
    FINISHED = auto()


class GameEndReason(StrEnum):
    """Why a driven game stopped."""

    NO_MOVES = "no_moves"
    ILLEGAL_MOVE = "illegal_move"
    PLY_LIMIT = "ply_limit"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, snapshot: GameSnapshot, legal_moves: list[Move]) -> Move:
        """Return one move drawn from *legal_moves*.

        *snapshot* is an isolated copy; nothing done to it reaches the game.
        """

"""GameController: drives two players through one session.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dama.core.enums import GameResult, Side
from dama.core.move import Move
from dama.core.rules import MoveResult
from dama.game.interfaces import GameEndReason, IPlayer
from dama.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
RejectedCallback = Callable[[Side, MoveResult], None]  # offending side, result
GameOverCallback = Callable[["GameOutcome"], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """How a driven game ended."""

    result: GameResult
    reason: GameEndReason
    plies: int

    @property
    def winner(self) -> Side | None:
        return self.result.winner


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Asks the player to move, commits the answer, repeats until the end.

    A rejected move forfeits the game for the side that proposed it; the
    session itself is left untouched. Reaching ``max_plies`` is adjudicated
    as a draw.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(
        self,
        white: IPlayer,
        black: IPlayer,
        state: GameState | None = None,
    ) -> None:
        if white.side != Side.WHITE or black.side != Side.BLACK:
            raise ValueError("Players must be given as (white, black)")
        self._state = state if state is not None else GameState()
        self._players: dict[Side, IPlayer] = {Side.WHITE: white, Side.BLACK: black}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._state.side_to_move]

    def player(self, side: Side) -> IPlayer:
        return self._players[side]

    # ── Driving ──────────────────────────────────────────────────────────

    def play_turn(self) -> MoveResult:
        """Ask the side to move for one move and commit it."""
        side = self._state.side_to_move
        player = self._players[side]
        legal = self._state.legal_moves()
        move = player.choose_move(self._state.snapshot(), legal)

        result = self._state.commit_move(move)
        if not result:
            _LOGGER.warning(
                "%s (%s) proposed %r: %s", player.name, side, move, result.reason
            )
            for cb in self.events.on_rejected:
                cb(side, result)
            return result

        for cb in self.events.on_move:
            cb(move, self._state)
        return result

    def play(self, max_plies: int | None = None) -> GameOutcome:
        """Play until the game ends, a player forfeits or the ply cap is hit."""
        while not self._state.is_game_over:
            if max_plies is not None and self._state.ply_count >= max_plies:
                return self._finish(GameResult.DRAW, GameEndReason.PLY_LIMIT)

            side = self._state.side_to_move
            if not self.play_turn():
                return self._finish(
                    GameResult.win_for(side.opposite), GameEndReason.ILLEGAL_MOVE
                )

        return self._finish(self._state.result, GameEndReason.NO_MOVES)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, result: GameResult, reason: GameEndReason) -> GameOutcome:
        outcome = GameOutcome(result=result, reason=reason, plies=self._state.ply_count)
        _LOGGER.info(
            "Game ended (%s) after %d plies: %s", reason, outcome.plies, result.name
        )
        for cb in self.events.on_game_over:
            cb(outcome)
        return outcome

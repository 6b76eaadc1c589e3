"""Match harness: a series of games between two entrants.

Colours alternate between games by default. Scores are kept per entrant
name, so a pairing can be re-run with different settings and compared.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dama.core.enums import GameResult, Side
from dama.game.controller import GameController, GameOutcome
from dama.game.interfaces import IPlayer
from dama.game.player import RandomPlayer

_LOGGER = logging.getLogger(__name__)

PlayerFactory = Callable[[Side, "int | None"], IPlayer]  # side, per-game seed


@dataclass
class TournamentSettings:
    """Configurable knobs of a match."""

    games: int = 10
    max_plies: int = 200
    alternate_colors: bool = True
    seed: int | None = None

    def game_seed(self, index: int) -> int | None:
        """Deterministic per-game seed when a match seed is set."""
        if self.seed is None:
            return None
        return self.seed * 1_000 + 2 * index


@dataclass(frozen=True, slots=True)
class Entrant:
    """A named participant and how to build its player for one game."""

    name: str
    factory: PlayerFactory

    @classmethod
    def random(cls, name: str = "Random") -> Entrant:
        return cls(name, lambda side, seed: RandomPlayer(side, name, seed))


@dataclass
class ScoreLine:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws


@dataclass(frozen=True, slots=True)
class GameSummary:
    """One finished game of the match."""

    index: int
    white: str
    black: str
    outcome: GameOutcome

    @property
    def winner_name(self) -> str | None:
        if self.outcome.winner == Side.WHITE:
            return self.white
        if self.outcome.winner == Side.BLACK:
            return self.black
        return None


@dataclass
class TournamentRecord:
    """Aggregated results of a match."""

    scores: dict[str, ScoreLine] = field(default_factory=dict)
    games: list[GameSummary] = field(default_factory=list)

    def add(self, summary: GameSummary) -> None:
        self.games.append(summary)
        white = self.scores.setdefault(summary.white, ScoreLine())
        black = self.scores.setdefault(summary.black, ScoreLine())
        result = summary.outcome.result
        if result == GameResult.WHITE_WINS:
            white.wins += 1
            black.losses += 1
        elif result == GameResult.BLACK_WINS:
            black.wins += 1
            white.losses += 1
        else:
            white.draws += 1
            black.draws += 1


def run_tournament(
    first: Entrant,
    second: Entrant,
    settings: TournamentSettings | None = None,
) -> TournamentRecord:
    """Play ``settings.games`` games; *first* takes White in game 0."""
    if first.name == second.name:
        raise ValueError(f"Entrant names must differ, both are {first.name!r}")
    settings = settings or TournamentSettings()
    record = TournamentRecord()
    record.scores[first.name] = ScoreLine()
    record.scores[second.name] = ScoreLine()

    for index in range(settings.games):
        swap = settings.alternate_colors and index % 2 == 1
        white, black = (second, first) if swap else (first, second)
        seed = settings.game_seed(index)

        controller = GameController(
            white.factory(Side.WHITE, seed),
            black.factory(Side.BLACK, None if seed is None else seed + 1),
        )
        outcome = controller.play(max_plies=settings.max_plies)
        summary = GameSummary(index, white.name, black.name, outcome)
        record.add(summary)
        _LOGGER.info(
            "Game %d: %s (white) vs %s (black) -> %s, %s",
            index + 1,
            white.name,
            black.name,
            outcome.result.name,
            outcome.reason,
        )

    for name, line in record.scores.items():
        _LOGGER.info("%s: +%d -%d =%d", name, line.wins, line.losses, line.draws)
    return record

"""Game management layer: session, players, controller, match harness.

Quick start::

    from dama.core import Side
    from dama.game import GameController, RandomPlayer

    ctrl = GameController(
        RandomPlayer(Side.WHITE, seed=1),
        RandomPlayer(Side.BLACK, seed=2),
    )
    outcome = ctrl.play(max_plies=200)
"""

from dama.game.controller import GameController, GameEvents, GameOutcome
from dama.game.interfaces import GameEndReason, GamePhase, IPlayer
from dama.game.player import CallbackPlayer, ConsolePlayer, RandomPlayer
from dama.game.state import GameSnapshot, GameState
from dama.game.tournament import (
    Entrant,
    ScoreLine,
    TournamentRecord,
    TournamentSettings,
    run_tournament,
)

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IPlayer",
    # Concrete
    "CallbackPlayer",
    "ConsolePlayer",
    "Entrant",
    "GameController",
    "GameEvents",
    "GameOutcome",
    "GameSnapshot",
    "GameState",
    "RandomPlayer",
    "ScoreLine",
    "TournamentRecord",
    "TournamentSettings",
    "run_tournament",
]

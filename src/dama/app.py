"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dama.core.enums import Side
from dama.core.move import Move
from dama.core.notation import STARTING_FEN, move_to_text
from dama.game.controller import GameController, GameOutcome
from dama.game.player import ConsolePlayer, RandomPlayer
from dama.game.state import GameState
from dama.game.tournament import Entrant, TournamentSettings, run_tournament
from dama.ui.text_board import render_board

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dama", description="Czech draughts engine")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="play against the random player")
    play.add_argument("--side", choices=("white", "black"), default="white")
    play.add_argument("--seed", type=int, default=None)
    play.add_argument("--unicode", action="store_true", help="draughts glyphs")

    selfplay = sub.add_parser("selfplay", help="random vs random match")
    selfplay.add_argument("--games", type=int, default=TournamentSettings.games)
    selfplay.add_argument("--max-plies", type=int, default=TournamentSettings.max_plies)
    selfplay.add_argument("--seed", type=int, default=None)

    show = sub.add_parser("show", help="render a position string")
    show.add_argument("fen", nargs="?", default=STARTING_FEN)
    show.add_argument("--unicode", action="store_true")

    replay = sub.add_parser("replay", help="replay a game record file")
    replay.add_argument("path", type=Path)
    replay.add_argument("--unicode", action="store_true")
    return parser


def _cmd_play(args: argparse.Namespace) -> int:
    human_side = Side.WHITE if args.side == "white" else Side.BLACK
    human = ConsolePlayer(human_side, "You")
    engine = RandomPlayer(human_side.opposite, "Random", args.seed)
    white, black = (human, engine) if human_side == Side.WHITE else (engine, human)
    controller = GameController(white, black)

    def _on_move(move: Move, state: GameState) -> None:
        print(f"{state.side_to_move.opposite}: {move_to_text(move)}")
        print(render_board(state.snapshot(), unicode_pieces=args.unicode))

    def _on_over(outcome: GameOutcome) -> None:
        print(f"Game over ({outcome.reason}): {outcome.result.name}")

    controller.events.on_move.append(_on_move)
    controller.events.on_game_over.append(_on_over)

    print(render_board(controller.state.snapshot(), unicode_pieces=args.unicode))
    try:
        controller.play()
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        return 1
    return 0


def _cmd_selfplay(args: argparse.Namespace) -> int:
    settings = TournamentSettings(
        games=args.games, max_plies=args.max_plies, seed=args.seed
    )
    record = run_tournament(
        Entrant.random("Random A"), Entrant.random("Random B"), settings
    )
    for summary in record.games:
        outcome = summary.outcome
        print(
            f"{summary.index + 1:>3}. {summary.white} - {summary.black}: "
            f"{outcome.result.name} ({outcome.reason}, {outcome.plies} plies)"
        )
    for name, line in record.scores.items():
        print(f"{name}: +{line.wins} -{line.losses} ={line.draws} ({line.points} pts)")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    state = GameState.from_fen(args.fen)
    print(render_board(state.snapshot(), unicode_pieces=args.unicode))
    return 0


def _cmd_replay(args: argparse.Namespace) -> int:
    state = GameState.from_record(args.path.read_text(encoding="utf-8"))
    print(render_board(state.snapshot(), unicode_pieces=args.unicode))
    print(f"{state.ply_count} plies, result {state.result.name}")
    return 0


_COMMANDS = {
    "play": _cmd_play,
    "selfplay": _cmd_selfplay,
    "show": _cmd_show,
    "replay": _cmd_replay,
}


def main(argv: list[str] | None = None) -> int:
    """Run the ``dama`` command line."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return _COMMANDS[args.command](args)
    except (OSError, ValueError) as exc:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"dama: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

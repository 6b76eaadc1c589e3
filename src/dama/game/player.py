"""Concrete player implementations."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import TYPE_CHECKING

from dama.core.enums import Side
from dama.core.notation import move_to_text, parse_move
from dama.game.interfaces import IPlayer

if TYPE_CHECKING:
    from dama.core.move import Move
    from dama.game.state import GameSnapshot

ChooseMove = Callable[["GameSnapshot", "list[Move]"], "Move"]


class RandomPlayer(IPlayer):
    """Plays a uniformly random legal move.

    Args:
        side: Side the player plays.
        name: Display name.
        seed: Seed for a private ``random.Random``; ``None`` for system entropy.
    """

    __slots__ = ("_side", "_name", "_rng")

    def __init__(self, side: Side, name: str = "Random", seed: int | None = None) -> None:
        self._side = side
        self._name = name
        self._rng = random.Random(seed)

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, snapshot: GameSnapshot, legal_moves: list[Move]) -> Move:
        return self._rng.choice(legal_moves)


class CallbackPlayer(IPlayer):
    """A player that delegates move choice to a callable.

    Useful for plugging in an external search without subclassing.

    Args:
        side: Side the player plays.
        choose: ``(GameSnapshot, list[Move]) -> Move``.
        name: Display name.
    """

    __slots__ = ("_side", "_name", "_choose")

    def __init__(self, side: Side, choose: ChooseMove, name: str = "Engine") -> None:
        self._side = side
        self._name = name
        self._choose = choose

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, snapshot: GameSnapshot, legal_moves: list[Move]) -> Move:
        return self._choose(snapshot, legal_moves)


class ConsolePlayer(IPlayer):
    """A human typing moves such as ``c3-d4`` or ``e3xg5xe7``.

    Prompts until the text names one of the legal moves; ``?`` lists them.
    """

    __slots__ = ("_side", "_name", "_input", "_output")

    def __init__(
        self,
        side: Side,
        name: str = "",
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._side = side
        self._name = name or f"Player ({side})"
        self._input = input_fn or input
        self._output = output_fn or print

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, snapshot: GameSnapshot, legal_moves: list[Move]) -> Move:
        while True:
            text = self._input(f"{self._side} move> ").strip()
            if text == "?":
                self._output(", ".join(move_to_text(m) for m in legal_moves))
                continue
            move = parse_move(text)
            if move is None:
                self._output(f"Cannot read {text!r}; try c3-d4 or e3xg5 (? lists moves)")
                continue
            if move not in legal_moves:
                self._output(f"{move_to_text(move)} is not legal here (? lists moves)")
                continue
            return move

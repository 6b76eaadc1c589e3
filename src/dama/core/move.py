"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from dama.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one full turn.

    A simple step has no captures. A capturing move lists every jumped
    square in order; ``to_sq`` is the landing square of the last jump.
    """

    from_sq: Square
    to_sq: Square
    captures: tuple[Square, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.captures, tuple):
            object.__setattr__(self, "captures", tuple(self.captures))

    @property
    def is_capture(self) -> bool:
        return len(self.captures) > 0

    @property
    def path(self) -> tuple[Square, ...]:
        """Origin followed by every landing square.

        Each landing mirrors the previous square over the captured one.
        """
        if not self.captures:
            return (self.from_sq, self.to_sq)
        squares = [Square(*self.from_sq)]
        for cap in self.captures:
            prev = squares[-1]
            squares.append(Square(2 * cap[0] - prev.row, 2 * cap[1] - prev.col))
        return tuple(squares)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        from dama.core.notation.moves import move_to_text

        return move_to_text(self)

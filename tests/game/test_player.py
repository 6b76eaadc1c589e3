"""Tests for concrete players."""

from dama.core.enums import Side
from dama.core.move import Move
from dama.core.types import C3, D4
from dama.game.player import CallbackPlayer, ConsolePlayer, RandomPlayer
from dama.game.state import GameState


class TestRandomPlayer:
    def test_picks_a_legal_move(self) -> None:
        state = GameState()
        player = RandomPlayer(Side.WHITE, seed=7)
        legal = state.legal_moves()
        for _ in range(20):
            assert player.choose_move(state.snapshot(), legal) in legal

    def test_seed_is_reproducible(self) -> None:
        state = GameState()
        legal = state.legal_moves()
        a = RandomPlayer(Side.WHITE, seed=3)
        b = RandomPlayer(Side.WHITE, seed=3)
        picks_a = [a.choose_move(state.snapshot(), legal) for _ in range(10)]
        picks_b = [b.choose_move(state.snapshot(), legal) for _ in range(10)]
        assert picks_a == picks_b

    def test_identity(self) -> None:
        player = RandomPlayer(Side.BLACK, name="Rnd")
        assert player.side == Side.BLACK
        assert player.name == "Rnd"
        assert not player.is_human


class TestCallbackPlayer:
    def test_delegates(self) -> None:
        calls: list[int] = []

        def choose(snapshot, legal):
            calls.append(len(legal))
            return legal[-1]

        state = GameState()
        player = CallbackPlayer(Side.WHITE, choose)
        move = player.choose_move(state.snapshot(), state.legal_moves())
        assert move == state.legal_moves()[-1]
        assert calls == [7]
        assert player.name == "Engine"


class TestConsolePlayer:
    def _player(self, answers: list[str], out: list[str]) -> ConsolePlayer:
        feed = iter(answers)
        return ConsolePlayer(
            Side.WHITE, input_fn=lambda prompt: next(feed), output_fn=out.append
        )

    def test_reads_a_move(self) -> None:
        state = GameState()
        out: list[str] = []
        player = self._player(["c3-d4"], out)
        assert player.choose_move(state.snapshot(), state.legal_moves()) == Move(C3, D4)
        assert out == []

    def test_retries_until_legal(self) -> None:
        state = GameState()
        out: list[str] = []
        player = self._player(["nonsense", "c3-c5", "?", " c3-d4 "], out)
        assert player.choose_move(state.snapshot(), state.legal_moves()) == Move(C3, D4)
        assert out[0].startswith("Cannot read 'nonsense'")
        assert "not legal" in out[1]
        assert "c3-d4" in out[2] and "g3-h4" in out[2]

    def test_default_name_and_human(self) -> None:
        player = ConsolePlayer(Side.BLACK)
        assert player.name == "Player (black)"
        assert player.is_human

"""Capture-chain resolver tests."""

from dama.core.capture_chain import has_capture, resolve_captures
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.types import (
    A5,
    B4,
    B6,
    C3,
    C5,
    C7,
    D4,
    D6,
    E3,
    E5,
    E7,
    F6,
    F8,
)


class TestSingleAndDouble:
    def test_empty_origin_has_no_chains(self, make_position) -> None:
        pos = make_position({"c3": "w"})
        assert resolve_captures(pos.board, D4) == []
        assert not has_capture(pos.board, D4)

    def test_double_jump(self, make_position) -> None:
        pos = make_position({"b4": "w", "c5": "b", "e7": "b"})
        chains = resolve_captures(pos.board, B4)
        assert chains == [Move(B4, F8, (C5, E7))]
        assert chains[0].path == (B4, D6, F8)

    def test_partial_chain_not_offered(self, make_position) -> None:
        pos = make_position({"b4": "w", "c5": "b", "e7": "b"})
        assert Move(B4, D6, (C5,)) not in resolve_captures(pos.board, B4)

    def test_branching_chains_of_different_length(self, make_position) -> None:
        pos = make_position({"e3": "w", "d4": "b", "f4": "b", "b6": "b"})
        chains = {str(m) for m in resolve_captures(pos.board, E3)}
        assert chains == {"e3xc5xa7", "e3xg5"}

    def test_black_man_jumps_downward(self, make_position) -> None:
        pos = make_position({"f6": "b", "e5": "w", "c3": "w"}, Side.BLACK)
        chains = {str(m) for m in resolve_captures(pos.board, F6)}
        assert chains == {"f6xd4xb2"}

    def test_board_is_not_modified(self, make_position) -> None:
        pos = make_position({"b4": "w", "c5": "b", "e7": "b"})
        before = pos.board.copy()
        resolve_captures(pos.board, B4)
        assert pos.board == before


class TestPromotionEndsChain:
    def test_man_stops_on_far_row(self, make_position) -> None:
        # As a king on f8 it could take g7 next; as a man it cannot.
        pos = make_position({"d6": "w", "e7": "b", "g7": "b"})
        assert resolve_captures(pos.board, D6) == [Move(D6, F8, (E7,))]

    def test_king_continues_backward(self, make_position) -> None:
        pos = make_position({"d6": "W", "e7": "b", "g7": "b"})
        chains = {str(m) for m in resolve_captures(pos.board, D6)}
        assert chains == {"d6xf8xh6"}


class TestKingLoop:
    def _loop_position(self, make_position):
        return make_position(
            {"c3": "W", "d4": "b", "d6": "b", "b6": "b", "b4": "b"}
        )

    def test_two_loops_returning_to_origin(self, make_position) -> None:
        pos = self._loop_position(make_position)
        chains = resolve_captures(pos.board, C3)
        assert len(chains) == 2
        for move in chains:
            assert move.from_sq == C3
            assert move.to_sq == C3
            assert len(move.captures) == 4
            assert set(move.captures) == {D4, D6, B6, B4}

    def test_loop_paths(self, make_position) -> None:
        pos = self._loop_position(make_position)
        paths = {m.path for m in resolve_captures(pos.board, C3)}
        assert paths == {(C3, E5, C7, A5, C3), (C3, A5, C7, E5, C3)}

    def test_each_piece_captured_once(self, make_position) -> None:
        pos = self._loop_position(make_position)
        for move in resolve_captures(pos.board, C3):
            assert len(set(move.captures)) == len(move.captures)


class TestHasCapture:
    def test_detects_single_jump(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "b"})
        assert has_capture(pos.board, D4)
        assert has_capture(pos.board, E5)  # black takes back over d4

    def test_landing_must_be_empty(self, make_position) -> None:
        pos = make_position({"d4": "w", "c5": "b", "b6": "b"})
        assert not has_capture(pos.board, D4)

    def test_jump_off_board_is_not_a_capture(self, make_position) -> None:
        pos = make_position({"b6": "w", "a7": "b"})
        assert not has_capture(pos.board, B6)

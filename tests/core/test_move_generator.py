"""Move generator tests: steps, directions and mandatory capture."""

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.notation import parse_move
from dama.core.types import (
    A3,
    B4,
    C3,
    C5,
    D4,
    D6,
    E3,
    E5,
    F4,
    F6,
    G3,
    H4,
)


def _texts(moves: list[Move]) -> set[str]:
    return {str(m) for m in moves}


class TestInitialPosition:
    def test_white_has_seven_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        moves = gen.generate_legal_moves(Side.WHITE)
        assert len(moves) == 7
        assert not any(m.is_capture for m in moves)

    def test_white_moves_exact(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert _texts(gen.generate_legal_moves(Side.WHITE)) == {
            "a3-b4",
            "c3-b4",
            "c3-d4",
            "e3-d4",
            "e3-f4",
            "g3-f4",
            "g3-h4",
        }

    def test_black_has_seven_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert len(gen.generate_legal_moves(Side.BLACK)) == 7

    def test_c3_d4_is_legal(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert Move(C3, D4) in gen.generate_legal_moves(Side.WHITE)


class TestDirections:
    def test_white_man_moves_up_only(self, make_position) -> None:
        pos = make_position({"d4": "w"})
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert _texts(moves) == {"d4-c5", "d4-e5"}

    def test_black_man_moves_down_only(self, make_position) -> None:
        pos = make_position({"d4": "b"}, Side.BLACK)
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.BLACK)
        assert _texts(moves) == {"d4-c3", "d4-e3"}

    def test_king_moves_all_four_ways(self, make_position) -> None:
        pos = make_position({"d4": "W"})
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert _texts(moves) == {"d4-c5", "d4-e5", "d4-c3", "d4-e3"}

    def test_edge_limits_steps(self, make_position) -> None:
        pos = make_position({"a3": "w", "h4": "w"})
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert _texts(moves) == {"a3-b4", "h4-g5"}

    def test_man_does_not_capture_backward(self, make_position) -> None:
        pos = make_position({"d4": "w", "c3": "b", "e3": "b", "h8": "b"})
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert not any(m.is_capture for m in moves)

    def test_king_captures_backward(self, make_position) -> None:
        pos = make_position({"d4": "W", "c3": "b"})
        moves = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert moves == [parse_move("d4xb2")]


class TestMandatoryCapture:
    def test_only_captures_when_available(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "b", "a3": "w"})
        gen = MoveGenerator(pos.board)
        legal = gen.generate_legal_moves(Side.WHITE)
        assert legal == [Move(D4, F6, (E5,))]
        assert gen.has_captures(Side.WHITE)

    def test_simple_moves_still_listed_separately(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "b", "a3": "w"})
        steps = MoveGenerator(pos.board).generate_simple_moves(Side.WHITE)
        assert Move(A3, B4) in steps

    def test_captures_by_several_pieces_all_offered(self, make_position) -> None:
        pos = make_position({"c3": "w", "g3": "w", "d4": "b", "f4": "b"})
        legal = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert _texts(legal) == {"c3xe5", "g3xe5"}

    def test_no_longest_capture_priority(self, make_position) -> None:
        pos = make_position({"e3": "w", "d4": "b", "f4": "b", "b6": "b"})
        legal = MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert _texts(legal) == {"e3xc5xa7", "e3xg5"}

    def test_blocked_jump_is_not_a_capture(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "b", "f6": "b"})
        gen = MoveGenerator(pos.board)
        assert not gen.has_captures(Side.WHITE)
        assert _texts(gen.generate_legal_moves(Side.WHITE)) == {"d4-c5"}

    def test_own_piece_is_not_jumped(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "w"})
        gen = MoveGenerator(pos.board)
        assert not gen.has_captures(Side.WHITE)


class TestQueries:
    def test_no_pieces_no_moves(self, make_position) -> None:
        pos = make_position({"c3": "w"})
        gen = MoveGenerator(pos.board)
        assert gen.generate_legal_moves(Side.BLACK) == []
        assert not gen.has_legal_moves(Side.BLACK)

    def test_blocked_side_has_no_moves(self, make_position) -> None:
        # White man on a3 blocked by b4, whose jump lands on an occupied c5.
        pos = make_position({"a3": "w", "b4": "b", "c5": "b"})
        gen = MoveGenerator(pos.board)
        assert gen.generate_legal_moves(Side.WHITE) == []
        assert not gen.has_legal_moves(Side.WHITE)

    def test_has_legal_moves_matches_generation(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.has_legal_moves(Side.WHITE)
        assert gen.has_legal_moves(Side.BLACK)

    def test_legal_moves_from_applies_mandatory_capture(self, make_position) -> None:
        pos = make_position({"d4": "w", "e5": "b", "g3": "w"})
        gen = MoveGenerator(pos.board)
        assert gen.legal_moves_from(G3) == []
        assert gen.legal_moves_from(D4) == [Move(D4, F6, (E5,))]

    def test_legal_moves_from_empty_square(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves_from(D4) == []
        assert gen.legal_moves_from(E3) == [Move(E3, D4), Move(E3, F4)]

    def test_generation_leaves_board_untouched(self, make_position) -> None:
        pos = make_position({"e3": "w", "d4": "b", "f4": "b", "b6": "b"})
        before = pos.board.copy()
        MoveGenerator(pos.board).generate_legal_moves(Side.WHITE)
        assert pos.board == before
        assert pos.board[C5] is None and pos.board[D6] is None
        assert pos.board[H4] is None and pos.board[F6] is None

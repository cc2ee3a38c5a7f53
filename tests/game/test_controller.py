"""Tests for TurnController — the pick-driven orchestrator."""

import logging

import pytest

from starchess.core.board import Board
from starchess.core.enums import Color, PieceType
from starchess.core.notation import parse_placement
from starchess.core.types import parse_square
from starchess.game.controller import TurnController
from starchess.game.interfaces import SelectionPhase
from starchess.game.state import MoveApplied


def _pick(ctrl: TurnController, name: str) -> bool:
    return ctrl.pick_square(*parse_square(name))


def _assert_one_piece_per_square(ctrl: TurnController) -> None:
    squares = [p.square for p in ctrl.pieces()]
    assert len(squares) == len(set(squares))


class TestInitialState:
    def test_white_starts_idle(self) -> None:
        ctrl = TurnController()
        assert ctrl.current_player == Color.WHITE
        assert ctrl.selected_piece is None
        assert ctrl.legal_targets == []
        assert ctrl.phase == SelectionPhase.IDLE

    def test_default_board_is_initial(self) -> None:
        ctrl = TurnController()
        assert len(ctrl.pieces()) == 32

    def test_custom_board_and_side(self) -> None:
        board = parse_placement("4k3/8/8/8/8/8/8/4K3")
        ctrl = TurnController(board, current_player=Color.BLACK)
        assert ctrl.board is board
        assert ctrl.current_player == Color.BLACK


class TestSelection:
    def test_select_own_piece(self) -> None:
        ctrl = TurnController()
        assert _pick(ctrl, "e2")
        assert ctrl.selected_piece is ctrl.board.piece_at(4, 1)
        assert ctrl.phase == SelectionPhase.SELECTED
        assert ctrl.move_targets == {(4, 2), (4, 3)}
        assert ctrl.capture_targets == set()

    def test_empty_square_while_idle_is_noop(self) -> None:
        ctrl = TurnController()
        assert not _pick(ctrl, "e4")
        assert ctrl.selected_piece is None

    def test_opponent_piece_while_idle_is_noop(self) -> None:
        ctrl = TurnController()
        assert not _pick(ctrl, "e7")
        assert ctrl.selected_piece is None
        assert ctrl.current_player == Color.WHITE

    def test_same_piece_deselects(self) -> None:
        ctrl = TurnController()
        _pick(ctrl, "g1")
        assert _pick(ctrl, "g1")
        assert ctrl.selected_piece is None
        assert ctrl.legal_targets == []
        assert ctrl.phase == SelectionPhase.IDLE

    def test_other_own_piece_switches_selection(self) -> None:
        ctrl = TurnController()
        _pick(ctrl, "e2")
        assert _pick(ctrl, "b1")
        assert ctrl.selected_piece is ctrl.board.piece_at(1, 0)
        assert ctrl.move_targets == {(0, 2), (2, 2)}

    def test_piece_without_moves_can_be_selected(self) -> None:
        ctrl = TurnController()
        assert _pick(ctrl, "a1")
        assert ctrl.selected_piece is not None
        assert ctrl.legal_targets == []

    def test_illegal_empty_square_keeps_selection(self) -> None:
        ctrl = TurnController()
        _pick(ctrl, "e2")
        before = ctrl.legal_targets
        assert not _pick(ctrl, "e5")
        assert ctrl.selected_piece is ctrl.board.piece_at(4, 1)
        assert ctrl.legal_targets == before

    def test_unreachable_opponent_keeps_selection(self) -> None:
        ctrl = TurnController()
        _pick(ctrl, "e2")
        assert not _pick(ctrl, "e7")
        assert ctrl.selected_piece is ctrl.board.piece_at(4, 1)

    @pytest.mark.parametrize("square", [(-1, 0), (8, 3), (0, 8), (3, -2)])
    def test_off_board_pick_is_noop(self, square: tuple[int, int]) -> None:
        ctrl = TurnController()
        _pick(ctrl, "e2")
        assert not ctrl.pick_square(*square)
        assert ctrl.selected_piece is ctrl.board.piece_at(4, 1)


class TestApplyMove:
    def test_double_step_from_home_rank(self) -> None:
        board = Board()
        pawn = board.add(Color.WHITE, PieceType.PAWN, 0, 1)
        ctrl = TurnController(board)
        _pick(ctrl, "a2")
        assert _pick(ctrl, "a4")
        assert pawn.square == (0, 3)
        assert ctrl.current_player == Color.BLACK
        assert ctrl.selected_piece is None
        assert ctrl.legal_targets == []

    def test_double_step_with_blocker_is_rejected(self) -> None:
        board = Board()
        pawn = board.add(Color.WHITE, PieceType.PAWN, 0, 1)
        board.add(Color.BLACK, PieceType.KNIGHT, 0, 2)
        ctrl = TurnController(board)
        _pick(ctrl, "a2")
        assert not _pick(ctrl, "a4")
        assert pawn.square == (0, 1)
        assert ctrl.current_player == Color.WHITE

    def test_capture_removes_only_the_victim(self) -> None:
        ctrl = TurnController()
        for name in ("e2", "e4", "d7", "d5", "e4"):
            _pick(ctrl, name)
        before = ctrl.board.snapshot()
        victim = ctrl.board.piece_at(3, 4)
        attacker = ctrl.board.piece_at(4, 3)
        assert victim is not None and attacker is not None
        assert ctrl.capture_targets == {(3, 4)}

        assert _pick(ctrl, "d5")

        after = ctrl.board.snapshot()
        assert victim not in ctrl.board
        assert len(after) == 31
        assert after[attacker.piece_id][2:] == (3, 4)
        for pid, info in before.items():
            if pid not in (victim.piece_id, attacker.piece_id):
                assert after[pid] == info
        _assert_one_piece_per_square(ctrl)

    def test_captured_king_is_just_removed(self) -> None:
        board = parse_placement("4k3/8/8/8/8/8/8/4RK2")
        ctrl = TurnController(board)
        _pick(ctrl, "e1")
        assert _pick(ctrl, "e8")
        assert len(ctrl.pieces()) == 2
        assert ctrl.current_player == Color.BLACK

    def test_move_event(self) -> None:
        ctrl = TurnController()
        events: list[MoveApplied] = []
        ctrl.events.on_move.append(events.append)
        pawn = ctrl.board.piece_at(4, 1)
        assert pawn is not None
        _pick(ctrl, "e2")
        _pick(ctrl, "e4")
        assert events == [MoveApplied(pawn.piece_id, (4, 1), (4, 3), None)]

    def test_capture_event_carries_victim_id(self) -> None:
        board = parse_placement("8/8/8/8/8/8/8/R2r4")
        victim = board.piece_at(3, 0)
        assert victim is not None
        ctrl = TurnController(board)
        events: list[MoveApplied] = []
        ctrl.events.on_move.append(events.append)
        _pick(ctrl, "a1")
        _pick(ctrl, "d1")
        assert len(events) == 1
        assert events[0].captured_piece_id == victim.piece_id
        assert events[0].is_capture

    def test_state_is_consistent_inside_callbacks(self) -> None:
        ctrl = TurnController()
        seen: list[tuple[Color, object]] = []
        ctrl.events.on_move.append(
            lambda _e: seen.append((ctrl.current_player, ctrl.selected_piece))
        )
        _pick(ctrl, "g1")
        _pick(ctrl, "f3")
        assert seen == [(Color.BLACK, None)]

    def test_move_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = TurnController()
        with caplog.at_level(logging.DEBUG, logger="starchess.game.controller"):
            _pick(ctrl, "e2")
            _pick(ctrl, "e4")
        assert any("e2 → e4" in r.getMessage() for r in caplog.records)


class TestTurnOrder:
    def test_strict_alternation(self) -> None:
        ctrl = TurnController()
        turns: list[Color] = []
        ctrl.events.on_turn_changed.append(turns.append)
        for frm, to in (("e2", "e4"), ("e7", "e5"), ("g1", "f3"), ("b8", "c6")):
            _pick(ctrl, frm)
            _pick(ctrl, to)
        assert turns == [Color.BLACK, Color.WHITE, Color.BLACK, Color.WHITE]

    def test_noops_do_not_flip_turn(self) -> None:
        ctrl = TurnController()
        turns: list[Color] = []
        ctrl.events.on_turn_changed.append(turns.append)
        for name in ("e7", "e4", "e2", "e5", "e2", "h8"):
            _pick(ctrl, name)
        assert turns == []
        assert ctrl.current_player == Color.WHITE

    def test_black_cannot_move_first(self) -> None:
        ctrl = TurnController()
        _pick(ctrl, "e7")
        assert not _pick(ctrl, "e5")
        assert ctrl.board.piece_at(4, 6) is not None

    def test_selection_events(self) -> None:
        ctrl = TurnController()
        seen: list[object] = []
        ctrl.events.on_selection_changed.append(seen.append)
        _pick(ctrl, "e2")
        _pick(ctrl, "e2")
        pawn = ctrl.board.piece_at(4, 1)
        assert seen == [pawn, None]


class TestRoundTrip:
    def test_rook_shuttle_restores_board(self) -> None:
        board = parse_placement("r7/8/8/8/8/8/8/R7")
        ctrl = TurnController(board)
        before = board.snapshot()

        for frm, to in (("a1", "a4"), ("a8", "a5"), ("a4", "a1"), ("a5", "a8")):
            _pick(ctrl, frm)
            assert _pick(ctrl, to)

        assert board.snapshot() == before
        assert ctrl.current_player == Color.WHITE

    def test_no_shared_squares_over_a_game(self) -> None:
        ctrl = TurnController()
        line = [
            "e2", "e4", "d7", "d5", "e4", "d5", "d8", "d5", "b1", "c3",
            "d5", "a2", "a1", "a2", "c8", "g4", "a2", "a7",
        ]
        for name in line:
            _pick(ctrl, name)
            _assert_one_piece_per_square(ctrl)
        assert len(ctrl.pieces()) < 32

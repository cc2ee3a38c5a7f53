"""TurnController — the pick-driven orchestrator of a two-player game.

Coordinates: Board, MoveRules, TurnState.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from starchess.core.board import Board
from starchess.core.enums import Color
from starchess.core.piece import Piece
from starchess.core.rules import LegalTarget, MoveRules
from starchess.core.types import Square, is_on_board, square_name
from starchess.game.interfaces import ITurnController, SelectionPhase
from starchess.game.state import MoveApplied, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveApplied], None]
SelectionCallback = Callable[[Piece | None], None]
TurnCallback = Callable[[Color], None]  # player now to move


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(ITurnController):
    """Owns the board and the selection state machine.

    ``pick_square`` is the only mutating entry point. Invalid picks are
    no-ops; listeners are notified only once a transition is complete.

    Thread-safety: designed to be called from a single thread (the UI
    thread). A multi-input host must serialise whole ``pick_square`` calls.
    """

    __slots__ = ("_board", "_state", "events")

    def __init__(
        self,
        board: Board | None = None,
        current_player: Color = Color.WHITE,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._state = TurnState(current_player=current_player)
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    @property
    def selected_piece(self) -> Piece | None:
        return self._state.selected_piece

    @property
    def legal_targets(self) -> list[LegalTarget]:
        return list(self._state.legal_targets)

    @property
    def move_targets(self) -> set[Square]:
        """Legal targets on empty squares."""
        return {t.square for t in self._state.legal_targets if not t.is_capture}

    @property
    def capture_targets(self) -> set[Square]:
        """Legal targets holding an opponent piece."""
        return {t.square for t in self._state.legal_targets if t.is_capture}

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    def pieces(self) -> list[Piece]:
        return self._board.pieces()

    # ── ITurnController impl ─────────────────────────────────────────────

    def pick_square(self, file: int, rank: int) -> bool:
        if not is_on_board(file, rank):
            _LOGGER.debug("Ignoring pick outside the board: (%d, %d)", file, rank)
            return False

        piece = self._board.piece_at(file, rank)
        selected = self._state.selected_piece
        _LOGGER.debug(
            "Pick %s holding %r (selected: %r)", square_name(file, rank), piece, selected
        )

        if selected is not None and piece is selected:
            self._state.clear_selection()
            self._emit_selection(None)
            return True

        if piece is not None and piece.color == self._state.current_player:
            self._select(piece)
            return True

        if selected is None:
            return False

        if self._state.target_at(file, rank) is None:
            return False

        self._apply_move(selected, file, rank)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, piece: Piece) -> None:
        self._state.select(piece, MoveRules.legal_targets(piece, self._board))
        self._emit_selection(piece)

    def _apply_move(self, piece: Piece, file: int, rank: int) -> None:
        from_square = piece.square
        captured = self._board.piece_at(file, rank)
        captured_id: int | None = None
        if captured is not None:
            self._board.remove(captured)
            captured_id = captured.piece_id
            _LOGGER.info("%r captures %r", piece, captured)

        self._board.relocate(piece, file, rank)
        self._state.clear_selection()
        self._state.pass_turn()

        event = MoveApplied(
            moved_piece_id=piece.piece_id,
            from_square=from_square,
            to_square=(file, rank),
            captured_piece_id=captured_id,
        )
        _LOGGER.debug(
            "Moved #%d %s → %s", piece.piece_id, square_name(*from_square),
            square_name(file, rank),
        )

        self._emit_move(event)
        self._emit_selection(None)
        self._emit_turn(self._state.current_player)

    def _emit_move(self, event: MoveApplied) -> None:
        for cb in self.events.on_move:
            cb(event)

    def _emit_selection(self, piece: Piece | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(piece)

    def _emit_turn(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)

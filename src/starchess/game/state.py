"""Turn and selection state plus the move notification payload."""

from __future__ import annotations

from dataclasses import dataclass, field

from starchess.core.enums import Color
from starchess.core.piece import Piece
from starchess.core.rules import LegalTarget
from starchess.core.types import Square
from starchess.game.interfaces import SelectionPhase


@dataclass(frozen=True, slots=True)
class MoveApplied:
    """Emitted once per executed move."""

    moved_piece_id: int
    from_square: Square
    to_square: Square
    captured_piece_id: int | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece_id is not None


@dataclass
class TurnState:
    """Whose turn it is and what is currently selected.

    ``legal_targets`` is empty whenever ``selected_piece`` is None.
    """

    current_player: Color = Color.WHITE
    selected_piece: Piece | None = None
    legal_targets: list[LegalTarget] = field(default_factory=list)

    @property
    def phase(self) -> SelectionPhase:
        if self.selected_piece is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SELECTED

    def select(self, piece: Piece, targets: list[LegalTarget]) -> None:
        self.selected_piece = piece
        self.legal_targets = targets

    def clear_selection(self) -> None:
        self.selected_piece = None
        self.legal_targets = []

    def pass_turn(self) -> None:
        self.current_player = self.current_player.opposite

    def target_at(self, file: int, rank: int) -> LegalTarget | None:
        for target in self.legal_targets:
            if target.file == file and target.rank == rank:
                return target
        return None

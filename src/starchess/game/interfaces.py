"""Abstract interfaces for the game layer.

:class:`ITurnController` is the read and pick surface a turn controller
exposes; :class:`SelectionPhase` names its two states.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starchess.core.enums import Color
    from starchess.core.piece import Piece
    from starchess.core.rules import LegalTarget


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the pick handler."""

    IDLE = auto()
    SELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnController(ABC):
    """Interface for the turn and selection orchestrator."""

    @abstractmethod
    def pick_square(self, file: int, rank: int) -> bool:
        """Handle a pick at ``(file, rank)``. Returns True if state changed."""

    @property
    @abstractmethod
    def current_player(self) -> Color: ...

    @property
    @abstractmethod
    def selected_piece(self) -> Piece | None: ...

    @property
    @abstractmethod
    def legal_targets(self) -> list[LegalTarget]: ...

    @abstractmethod
    def pieces(self) -> list[Piece]:
        """All live pieces for redrawing."""

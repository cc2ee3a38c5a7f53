"""Game management layer — turn controller and selection state machine.

Quick start::

    from starchess.game import TurnController

    ctrl = TurnController()
    ctrl.pick_square(4, 1)  # select the e2 pawn
    ctrl.pick_square(4, 3)  # e2 → e4, black to move
"""

from starchess.game.controller import TurnController, TurnEvents
from starchess.game.interfaces import ITurnController, SelectionPhase
from starchess.game.state import MoveApplied, TurnState

__all__ = [
    # Interfaces
    "ITurnController",
    "SelectionPhase",
    # Concrete
    "MoveApplied",
    "TurnController",
    "TurnEvents",
    "TurnState",
]

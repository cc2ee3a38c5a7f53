"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from starchess.core import Board, MoveRules

    board = Board.initial()
    knight = board.piece_at(1, 0)
    for target in MoveRules.legal_targets(knight, board):
        print(target)
"""

from starchess.core.board import Board, BoardIntegrityError
from starchess.core.enums import Color, PieceType
from starchess.core.notation import STARTING_PLACEMENT, parse_placement, placement_of
from starchess.core.piece import Piece
from starchess.core.rules import LegalTarget, MoveRules
from starchess.core.types import (
    Square,
    all_squares,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "BoardIntegrityError",
    "LegalTarget",
    "MoveRules",
    "Piece",
    # Notation
    "STARTING_PLACEMENT",
    "parse_placement",
    "placement_of",
]

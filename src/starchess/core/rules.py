"""Move legality for every piece kind, evaluated against a :class:`Board`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from starchess.core.enums import PieceType
from starchess.core.types import Square, all_squares, is_on_board

if TYPE_CHECKING:
    from starchess.core.board import Board
    from starchess.core.piece import Piece


@dataclass(frozen=True, slots=True)
class LegalTarget:
    """A square the piece may move to; ``is_capture`` marks an enemy occupant."""

    file: int
    rank: int
    is_capture: bool = False

    @property
    def square(self) -> Square:
        return self.file, self.rank


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveRules:
    """Stateless rule-checker; the board is always passed in explicitly.

    No check detection: a move that leaves the own king attacked is legal,
    and kings can be captured like any other piece.
    """

    @staticmethod
    def is_legal(piece: Piece, target_file: int, target_rank: int, board: Board) -> bool:
        if not is_on_board(target_file, target_rank):
            return False

        occupant = board.piece_at(target_file, target_rank)
        if occupant is not None and occupant.color == piece.color:
            return False

        dx = target_file - piece.file
        dy = target_rank - piece.rank
        return _KIND_RULES[piece.piece_type](piece, dx, dy, board)

    @staticmethod
    def is_path_clear(board: Board, start: Square, end: Square) -> bool:
        """Whether every square strictly between *start* and *end* is empty.

        Walks the unit step towards *end*; only meaningful for straight or
        diagonal lines. The end square itself is never inspected.
        """
        step_f = _sign(end[0] - start[0])
        step_r = _sign(end[1] - start[1])
        f, r = start[0] + step_f, start[1] + step_r
        while (f, r) != end:
            if board.is_occupied(f, r):
                return False
            f += step_f
            r += step_r
        return True

    @staticmethod
    def legal_targets(piece: Piece, board: Board) -> list[LegalTarget]:
        """Every square *piece* may legally move to, ordered a1 → h8."""
        return [
            LegalTarget(f, r, board.is_occupied(f, r))
            for f, r in all_squares()
            if MoveRules.is_legal(piece, f, r, board)
        ]


# ── Per-kind geometry ────────────────────────────────────────────────────────
# Each receives the displacement (dx, dy); the shared bounds and
# friendly-occupant checks have already passed.


def _pawn(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    direction = piece.color.pawn_direction
    target = (piece.file + dx, piece.rank + dy)

    if dx == 0 and dy == direction:
        return not board.is_occupied(*target)

    if dx == 0 and dy == 2 * direction:
        return (
            piece.rank == piece.color.home_rank
            and not board.is_occupied(piece.file, piece.rank + direction)
            and not board.is_occupied(*target)
        )

    if abs(dx) == 1 and dy == direction:
        occupant = board.piece_at(*target)
        return occupant is not None and occupant.color != piece.color

    return False


def _straight(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    if (dx == 0) == (dy == 0):
        return False
    return MoveRules.is_path_clear(
        board, piece.square, (piece.file + dx, piece.rank + dy)
    )


def _diagonal(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    if dx == 0 or abs(dx) != abs(dy):
        return False
    return MoveRules.is_path_clear(
        board, piece.square, (piece.file + dx, piece.rank + dy)
    )


def _knight(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    return {abs(dx), abs(dy)} == {1, 2}


def _queen(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    return _straight(piece, dx, dy, board) or _diagonal(piece, dx, dy, board)


def _king(piece: Piece, dx: int, dy: int, board: Board) -> bool:
    return max(abs(dx), abs(dy)) == 1


_KIND_RULES: dict[PieceType, Callable[[Piece, int, int, Board], bool]] = {
    PieceType.PAWN: _pawn,
    PieceType.ROOK: _straight,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _diagonal,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}

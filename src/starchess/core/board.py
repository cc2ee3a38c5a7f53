"""Board - the set of live pieces and their squares."""

from __future__ import annotations

from starchess.core.enums import Color, PieceType
from starchess.core.piece import Piece
from starchess.core.types import BOARD_SIZE, Square, is_on_board

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardIntegrityError(RuntimeError):
    """Raised when an operation would break the one-piece-per-square invariant.

    This signals a bug in the caller, not a user error.
    """


class Board:
    """Mutable collection of live pieces with a square index."""

    __slots__ = ("_by_id", "_by_square", "_next_id")

    def __init__(self) -> None:
        self._by_id: dict[int, Piece] = {}
        self._by_square: dict[Square, Piece] = {}
        self._next_id = 0

    # -- Element access -----------------------------------------------------

    def piece_at(self, file: int, rank: int) -> Piece | None:
        return self._by_square.get((file, rank))

    def is_occupied(self, file: int, rank: int) -> bool:
        return (file, rank) in self._by_square

    def get(self, piece_id: int) -> Piece | None:
        """Look up a live piece by its id."""
        return self._by_id.get(piece_id)

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self._by_id.get(piece.piece_id) is piece

    def __len__(self) -> int:
        return len(self._by_id)

    # -- Query helpers ------------------------------------------------------

    def pieces(self) -> list[Piece]:
        """All live pieces, in id order."""
        return sorted(self._by_id.values(), key=lambda p: p.piece_id)

    def pieces_of(self, color: Color) -> list[Piece]:
        return [p for p in self.pieces() if p.color == color]

    def snapshot(self) -> dict[int, tuple[PieceType, Color, int, int]]:
        """id → (type, color, file, rank) for every live piece."""
        return {
            p.piece_id: (p.piece_type, p.color, p.file, p.rank)
            for p in self._by_id.values()
        }

    # -- Mutation -----------------------------------------------------------

    def add(self, color: Color, piece_type: PieceType, file: int, rank: int) -> Piece:
        """Create a piece with a fresh id and place it."""
        piece = Piece(self._next_id, color, piece_type, file, rank)
        self.place(piece)
        return piece

    def place(self, piece: Piece) -> None:
        """Put *piece* on the board at its own coordinates."""
        if not is_on_board(piece.file, piece.rank):
            raise BoardIntegrityError(f"{piece!r} is off the board")
        if piece.piece_id in self._by_id:
            raise BoardIntegrityError(f"Piece id {piece.piece_id} is already live")
        if piece.square in self._by_square:
            raise BoardIntegrityError(
                f"Cannot place {piece!r}: square holds {self._by_square[piece.square]!r}"
            )
        self._by_id[piece.piece_id] = piece
        self._by_square[piece.square] = piece
        self._next_id = max(self._next_id, piece.piece_id + 1)

    def remove(self, piece: Piece) -> None:
        """Take *piece* off the board (capture)."""
        if piece not in self:
            raise BoardIntegrityError(f"Cannot remove {piece!r}: not on the board")
        del self._by_id[piece.piece_id]
        del self._by_square[piece.square]

    def relocate(self, piece: Piece, file: int, rank: int) -> None:
        """Move *piece* to an empty square, keeping its identity."""
        if piece not in self:
            raise BoardIntegrityError(f"Cannot relocate {piece!r}: not on the board")
        if not is_on_board(file, rank):
            raise BoardIntegrityError(f"Cannot relocate {piece!r} off the board")
        occupant = self._by_square.get((file, rank))
        if occupant is not None and occupant is not piece:
            raise BoardIntegrityError(
                f"Cannot relocate {piece!r}: target holds {occupant!r}"
            )
        del self._by_square[piece.square]
        piece.file, piece.rank = file, rank
        self._by_square[piece.square] = piece

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for f, pt in enumerate(_BACK_RANK):
                b.add(color, pt, f, color.back_rank)
            for f in range(BOARD_SIZE):
                b.add(color, PieceType.PAWN, f, color.home_rank)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self.piece_at(file, rank)
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

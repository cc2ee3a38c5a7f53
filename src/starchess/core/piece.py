"""Piece entity: kind, color and current square of one chessman."""

from __future__ import annotations

from dataclasses import dataclass

from starchess.core.enums import Color, PieceType
from starchess.core.types import Square, square_name

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(eq=False, slots=True)
class Piece:
    """A single chessman on the board.

    Pieces compare by identity: a piece keeps its ``piece_id`` and object
    identity for its whole life and is relocated, never recreated.
    Coordinates are only mutated through :meth:`Board.relocate`.
    """

    piece_id: int
    color: Color
    piece_type: PieceType
    file: int
    rank: int

    @property
    def square(self) -> Square:
        return self.file, self.rank

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    def __repr__(self) -> str:
        return (
            f"Piece(#{self.piece_id} {self.color} {self.piece_type} "
            f"@{square_name(self.file, self.rank)})"
        )

    @staticmethod
    def kind_from_char(char: str) -> tuple[Color, PieceType]:
        """Decode a FEN character, e.g. 'N' → (WHITE, KNIGHT)."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

"""PieceItem — a chess piece drawn as a figurine glyph on the scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from starchess.core.enums import PieceType
from starchess.core.piece import Piece

# Filled glyphs for both sides; the side is told apart by brush colour.
_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Holds the live :class:`Piece` it mirrors; the scene moves it by
    calling :meth:`place` after every state change.
    """

    _FONT_RATIO = 0.7

    def __init__(self, piece: Piece, tile_size: int) -> None:
        super().__init__(_GLYPHS[piece.piece_type])
        self.piece = piece
        self._tile_size = tile_size

        font = QFont()
        font.setPixelSize(max(int(tile_size * self._FONT_RATIO), 1))
        self.setFont(font)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def place(self, col: int, row: int) -> None:
        """Centre the glyph on visual tile ``(col, row)``."""
        t = self._tile_size
        bounds = self.boundingRect()
        self.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )

    def set_colors(self, fill: QColor, outline: QColor) -> None:
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1))

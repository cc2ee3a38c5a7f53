"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from starchess.core.enums import Color
from starchess.core.types import BOARD_SIZE, Square
from starchess.ui.board.piece_item import PieceItem
from starchess.ui.settings import AppSettings
from starchess.ui.styles.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from starchess.core.piece import Piece
    from starchess.game.controller import TurnController
    from starchess.game.state import MoveApplied


_DEFAULT_THEME = BoardTheme.space()


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Mouse presses are translated to ``(file, rank)`` and forwarded to the
    controller's ``pick_square``. The scene redraws whenever the controller
    reports a selection change, which also follows every applied move.
    """

    TILE = 80  # px per square

    def __init__(
        self,
        controller: TurnController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = _DEFAULT_THEME
        self._controller = controller
        self._tile = self.TILE

        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._target_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._piece_items: dict[int, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        self.refresh()
        if controller is not None:
            controller.events.on_selection_changed.append(self._on_selection_changed)

    # ── Public API ───────────────────────────────────────────────────────

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target highlights."""
        self._show_legal_moves = visible
        self._sync_targets()

    def apply_settings(self, settings: AppSettings) -> None:
        self._theme = THEMES.get(settings.board_theme, _DEFAULT_THEME)
        self._tile = settings.tile_size
        self._show_coordinates = settings.show_coordinates
        self._show_legal_moves = settings.show_legal_moves
        self._clear_items(self._last_move_highlights)
        self._draw_board()
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and target highlights from the controller."""
        self._sync_pieces()
        self._sync_targets()

    def highlight_last_move(self, event: MoveApplied | None) -> None:
        """Highlight origin/destination of the last applied move."""
        self._clear_items(self._last_move_highlights)
        if event is None:
            return
        for sq in (event.from_square, event.to_square):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._tile
        font = QFont("Adwaita Sans", max(9, t // 8))

        for r in range(BOARD_SIZE):
            for f in range(BOARD_SIZE):
                col, row = self._visual_coords(f, r)
                is_dark = (f + r) % 2 == 0
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(f, r)] = rect

                text_color = (
                    self._theme.coord_dark if is_dark else self._theme.coord_light
                )
                # Rank numbers (left edge)
                if f == 0:
                    self._add_coord(str(r + 1), col * t + 2, row * t + 1, font, text_color)
                # File letters (bottom edge)
                if r == 0:
                    self._add_coord(
                        chr(ord("a") + f), col * t + t - 12, row * t + t - 16, font,
                        text_color,
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's live pieces."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._controller is None:
            return

        selected = self._controller.selected_piece
        for piece in self._controller.pieces():
            item = PieceItem(piece, self._tile)
            if piece is selected:
                fill = self._theme.selected_piece
            elif piece.color == Color.WHITE:
                fill = self._theme.white_piece
            else:
                fill = self._theme.black_piece
            outline = (
                self._theme.black_piece
                if piece.color == Color.WHITE
                else self._theme.white_piece
            )
            item.set_colors(fill, outline)
            item.place(*self._visual_coords(piece.file, piece.rank))
            self.addItem(item)
            self._piece_items[piece.piece_id] = item

    def _sync_targets(self) -> None:
        self._clear_items(self._target_items)
        if self._controller is None or not self._show_legal_moves:
            return
        for target in self._controller.legal_targets:
            color = (
                self._theme.capture_target
                if target.is_capture
                else self._theme.move_target
            )
            self._target_items.append(self._make_highlight(target.square, color))

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._controller is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            return super().mousePressEvent(event)

        self._controller.pick_square(*sq)
        event.accept()

    def _on_selection_changed(self, _piece: Piece | None) -> None:
        self.refresh()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row (white at the bottom)."""
        return file, BOARD_SIZE - 1 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return col, BOARD_SIZE - 1 - row

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        col, row = self._visual_coords(*sq)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

"""MainWindow — top-level window hosting the board and a turn indicator."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from starchess.core.enums import Color
from starchess.core.types import square_name
from starchess.game.controller import TurnController
from starchess.game.state import MoveApplied
from starchess.ui.board.board_view import BoardView
from starchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Starchess."""

    def __init__(
        self,
        controller: TurnController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Starchess")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._controller = controller if controller is not None else TurnController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._connect_game_events()
        self._apply_settings()
        self._update_turn_label(self._controller.current_player)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)

        self._turn_label = QLabel()
        status = QStatusBar()
        status.addPermanentWidget(self._turn_label)
        self.setStatusBar(status)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move_applied)
        events.on_turn_changed.append(self._update_turn_label)

    def _apply_settings(self) -> None:
        self._board_view.board_scene.apply_settings(self._settings)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def turn_label(self) -> QLabel:
        return self._turn_label

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_move_applied(self, event: MoveApplied) -> None:
        self._board_view.board_scene.highlight_last_move(event)
        text = f"{square_name(*event.from_square)} → {square_name(*event.to_square)}"
        if event.is_capture:
            text += " (capture)"
        status = self.statusBar()
        if status is not None:
            status.showMessage(text, 4000)
        _LOGGER.debug("Status: %s", text)

    def _update_turn_label(self, color: Color) -> None:
        self._turn_label.setText(f"{str(color).capitalize()} to move")

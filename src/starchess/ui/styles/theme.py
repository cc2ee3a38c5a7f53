"""Visual theme constants and QSS styles for Starchess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and pieces."""

    light_square: QColor
    dark_square: QColor
    white_piece: QColor
    black_piece: QColor
    selected_piece: QColor  # currently selected piece
    move_target: QColor  # legal target on an empty square
    capture_target: QColor  # legal target holding an enemy piece
    last_move: QColor  # origin/destination of the last move
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(51, 51, 51),
            selected_piece=QColor(0, 255, 0),
            move_target=QColor(0, 255, 0, 90),  # green transparent
            capture_target=QColor(255, 0, 0, 110),  # red transparent
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def space(cls) -> BoardTheme:
        return cls(
            light_square=QColor(170, 204, 255),
            dark_square=QColor(51, 68, 102),
            white_piece=QColor(235, 240, 255),
            black_piece=QColor(20, 20, 30),
            selected_piece=QColor(0, 255, 0),
            move_target=QColor(0, 255, 0, 90),
            capture_target=QColor(255, 0, 0, 110),
            last_move=QColor(119, 170, 255, 90),
            coord_light=QColor(51, 68, 102),
            coord_dark=QColor(170, 204, 255),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Space": BoardTheme.space(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #000000;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #111111;
    color: #e0e0e0;
}
"""

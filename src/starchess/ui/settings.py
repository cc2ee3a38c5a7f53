"""User-configurable display settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Space"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    tile_size: int = 80  # px per square

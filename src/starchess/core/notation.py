"""Piece-placement text (the first field of FEN) for seeding boards."""

from __future__ import annotations

from starchess.core.board import Board
from starchess.core.piece import Piece
from starchess.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def parse_placement(text: str) -> Board:
    """Build a board from placement text, rank 8 first.

    Pieces receive ids in reading order starting at 0. A full FEN string is
    accepted; everything after the first space is ignored.
    """
    fields = text.split()
    if not fields:
        raise ValueError("Empty placement string")
    rows = fields[0].split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Expected 8 ranks, got {len(rows)}: {text!r}")

    board = Board()
    for i, row in enumerate(rows):
        rank = BOARD_SIZE - 1 - i
        file = 0
        for ch in row:
            if ch.isdigit():
                file += int(ch)
                continue
            if file >= BOARD_SIZE:
                raise ValueError(f"Rank {rank + 1} overflows: {row!r}")
            color, piece_type = Piece.kind_from_char(ch)
            board.add(color, piece_type, file, rank)
            file += 1
        if file != BOARD_SIZE:
            raise ValueError(f"Rank {rank + 1} has {file} files: {row!r}")
    return board


def placement_of(board: Board) -> str:
    """Serialise *board* back to placement text."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        row = ""
        empty = 0
        for file in range(BOARD_SIZE):
            piece = board.piece_at(file, rank)
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)

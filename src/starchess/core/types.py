"""Square type alias and coordinate helpers.

Squares are ``(file, rank)`` pairs with both components in ``0..7``:
    (0, 0) = a1, (7, 0) = h1, (0, 7) = a8, (7, 7) = h8
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE = 8


def is_on_board(file: int, rank: int) -> bool:
    """Whether ``(file, rank)`` lies inside the 8x8 board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def all_squares() -> list[Square]:
    """Every square, rank by rank starting from a1."""
    return [(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


def square_name(file: int, rank: int) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    return chr(ord("a") + file) + str(rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return ord(name[0]) - ord("a"), int(name[1]) - 1

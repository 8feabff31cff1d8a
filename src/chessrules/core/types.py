"""Board coordinates.

A square is a plain ``int`` in ``range(64)``, counted from a1 along each rank::

    a1=0 ... h1=7, a2=8 ... h2=15, ..., a8=56 ... h8=63

Everything here that builds a square checks the range, so a square obtained
through this module always names a real cell.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

SQUARE_NAMES: tuple[str, ...] = tuple(f + r for r in RANK_NAMES for f in FILE_NAMES)
_SQUARE_BY_NAME: dict[str, Square] = {name: i for i, name in enumerate(SQUARE_NAMES)}


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64


def check_square(sq: int) -> Square:
    """Return *sq* unchanged; raise ``ValueError`` if it is off the board."""
    if not is_valid_square(sq):
        raise ValueError(f"Square out of range: {sq!r}")
    return sq


def file_of(sq: Square) -> int:
    return sq % 8


def rank_of(sq: Square) -> int:
    return sq // 8


def make_square(file: int, rank: int) -> Square:
    """Square at *file*, *rank* (both 0-7).

    Raises:
        ValueError: if either component is off the board.
    """
    if file not in range(8) or rank not in range(8):
        raise ValueError(f"Square out of range: file={file}, rank={rank}")
    return 8 * rank + file


def square_name(sq: Square) -> str:
    return SQUARE_NAMES[check_square(sq)]


def parse_square(name: str) -> Square:
    """``'e4'`` -> 28. Only lower-case names are accepted."""
    try:
        return _SQUARE_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Invalid square name: {name!r}") from None


(
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2, B2, C2, D2, E2, F2, G2, H2,
    A3, B3, C3, D3, E3, F3, G3, H3,
    A4, B4, C4, D4, E4, F4, G4, H4,
    A5, B5, C5, D5, E5, F5, G5, H5,
    A6, B6, C6, D6, E6, F6, G6, H6,
    A7, B7, C7, D7, E7, F7, G7, H7,
    A8, B8, C8, D8, E8, F8, G8, H8,
) = range(64)

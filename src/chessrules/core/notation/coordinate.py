"""Coordinate move text: ``e2-e4``, ``e7-e8=Q``."""

from __future__ import annotations

import re

from chessrules.core.enums import PieceType
from chessrules.core.errors import MalformedMoveSyntax
from chessrules.core.move import Move
from chessrules.core.types import parse_square

_MOVE_RE = re.compile(r"^([a-h][1-8])-([a-h][1-8])(?:=([NBRQnbrq]))?$")

_PROMOTION_TYPES: dict[str, PieceType] = {
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
}


def parse_move(text: str) -> Move:
    """Parse coordinate move text into a :class:`Move`.

    Raises:
        MalformedMoveSyntax: if *text* does not match the notation.
    """
    match = _MOVE_RE.match(text.strip())
    if match is None:
        raise MalformedMoveSyntax(text)
    from_name, to_name, promo = match.groups()
    promotion = _PROMOTION_TYPES[promo.lower()] if promo else None
    return Move(parse_square(from_name), parse_square(to_name), promotion)


def move_to_text(move: Move) -> str:
    """Inverse of :func:`parse_move`."""
    return str(move)

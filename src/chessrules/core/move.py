"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, check_square, square_name

PROMOTION_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate move: origin, destination and optional promotion kind.

    ``promotion`` is only meaningful for a pawn reaching the last rank; when
    left as ``None`` on such a move the pawn becomes a queen. Both squares
    are range-checked on construction (``ValueError``).
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        check_square(self.from_sq)
        check_square(self.to_sq)

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += "=" + PROMOTION_CHARS.get(self.promotion, "?")
        return base

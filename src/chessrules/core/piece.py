"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Indexed by PieceType value.
_LETTERS = "?pnbrqk"


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece kind owned by one side. ``str()`` gives the FEN letter."""

    color: Color
    kind: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` is a white knight, ``'n'`` a black one."""
        index = _LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index < 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index))

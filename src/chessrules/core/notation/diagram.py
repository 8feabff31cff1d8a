"""Plain-text board diagram."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.types import FILE_NAMES, make_square

if TYPE_CHECKING:
    from chessrules.core.board import BoardView
    from chessrules.core.piece import Piece

# Indexed by PieceType value.
_GLYPHS = {Color.WHITE: "?♙♘♗♖♕♔", Color.BLACK: "?♟♞♝♜♛♚"}


def _cell(piece: Piece | None, unicode: bool, filler: str) -> str:
    if piece is None:
        return filler
    return _GLYPHS[piece.color][piece.kind] if unicode else str(piece)


def render_board(
    board: BoardView, *, unicode: bool = False, filler: str = "-"
) -> str:
    """Render *board* as an 8x8 grid, rank 8 on top.

    Each square is one character: the FEN letter (or Unicode glyph) of its
    piece, or *filler* when empty. The last line holds the file letters.
    """
    rows = [
        f"{rank + 1} "
        + "".join(
            _cell(board[make_square(file, rank)], unicode, filler)
            for file in range(8)
        )
        for rank in range(7, -1, -1)
    ]
    rows.append(f"  {FILE_NAMES}")
    return "\n".join(rows)

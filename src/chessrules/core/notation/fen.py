"""FEN placement parsing and serialization.

Only the first two fields (piece placement, side to move) carry meaning
here. Castling and en-passant fields are accepted on input and written
as ``-`` on output, since neither rule is played.
"""

from __future__ import annotations

from chessrules.core.board import Board, BoardView
from chessrules.core.enums import Color
from chessrules.core.errors import InvalidPositionError
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field into a validated :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidPositionError(
            f"Invalid FEN board (must contain 8 ranks): {placement!r}"
        )
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
            elif ch.isdigit():
                raise InvalidPositionError(f"Invalid FEN digit {ch!r}: {placement!r}")
            else:
                if file >= 8:
                    raise InvalidPositionError(
                        f"Invalid FEN rank width: {placement!r}"
                    )
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise InvalidPositionError(str(exc)) from None
                file += 1
            if file > 8:
                raise InvalidPositionError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise InvalidPositionError(f"Invalid FEN rank width: {placement!r}")

    board.validate()
    return board


def board_to_fen(board: BoardView) -> str:
    """Serialise piece placement (FEN field 1)."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_from_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into a board and the side to move.

    The side to move must not be able to capture the opposing king.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise InvalidPositionError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side_part = parts[1]
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidPositionError(f"Invalid FEN side-to-move field: {side_part!r}")

    if MoveGenerator(board).is_in_check(side.opposite):
        raise InvalidPositionError(
            f"Side not to move ({side.opposite}) is in check: {fen!r}"
        )
    return board, side


def position_to_fen(
    board: BoardView, side_to_move: Color, fullmove_number: int = 1
) -> str:
    """Serialise board and side to move to a six-field FEN."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side_str} - - 0 {fullmove_number}"

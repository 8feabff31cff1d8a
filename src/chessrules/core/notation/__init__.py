"""Notation package: coordinate move text, FEN placement, board diagram."""

from chessrules.core.notation.coordinate import move_to_text, parse_move
from chessrules.core.notation.diagram import render_board
from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "move_to_text",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
    "render_board",
]

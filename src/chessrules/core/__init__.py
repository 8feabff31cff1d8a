"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveValidator, parse_move

    board = Board.initial()
    MoveValidator.reason_if_illegal(board, Color.WHITE, parse_move("e2-e5"))
    # Rejection.ILLEGAL_FOR_PIECE_KIND
"""

from chessrules.core.board import Board, BoardView, ReadOnlyBoard
from chessrules.core.enums import Color, GameStatus, PieceType, Rejection
from chessrules.core.errors import (
    ChessRulesError,
    InvalidPositionError,
    MalformedMoveSyntax,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_text,
    parse_move,
    position_from_fen,
    position_to_fen,
    render_board,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    check_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chessrules.core.validator import MoveValidator, Verdict

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    "Rejection",
    # Errors
    "ChessRulesError",
    "InvalidPositionError",
    "MalformedMoveSyntax",
    # Types / helpers
    "Square",
    "check_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardView",
    "ReadOnlyBoard",
    "Move",
    "MoveGenerator",
    "MoveValidator",
    "Piece",
    "Rules",
    "Verdict",
    # Notation
    "STARTING_FEN",
    "move_to_text",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
    "render_board",
]

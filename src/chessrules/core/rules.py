"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from chessrules.core.board import BoardView
from chessrules.core.enums import Color, GameStatus
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.validator import MoveValidator


class Rules:
    """Static rule-checker that operates on a board and a side to move."""

    @staticmethod
    def is_in_check(board: BoardView, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: BoardView, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not MoveValidator.has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: BoardView, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not MoveValidator.has_legal_move(board, color)

    @staticmethod
    def status(board: BoardView, side_to_move: Color) -> GameStatus:
        """Classify the position from *side_to_move*'s point of view."""
        in_check = Rules.is_in_check(board, side_to_move)
        if MoveValidator.has_legal_move(board, side_to_move):
            return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

"""Move legality: piece patterns, turn order and own-king safety."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import BoardView
from chessrules.core.enums import Color, PieceType, Rejection
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    PROMOTION_TYPES,
    MoveGenerator,
    is_promotion_square,
)
from chessrules.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of validating one move.

    On acceptance ``placed`` is the piece that ends up on the destination
    square (the promoted piece for a promotion) and ``captured`` is the piece
    it removes, if any.
    """

    rejection: Rejection | None
    placed: Piece | None = None
    captured: Piece | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class MoveValidator:
    """Stateless legality checker.

    Every call works on the board passed in and keeps no reference to it;
    simulation happens on a scratch copy.
    """

    @staticmethod
    def validate(board: BoardView, side_to_move: Color, move: Move) -> Verdict:
        piece = board[move.from_sq]
        if piece is None:
            return Verdict(Rejection.NO_PIECE_AT_ORIGIN)
        if piece.color != side_to_move:
            return Verdict(Rejection.WRONG_TURN)

        if move.to_sq not in MoveGenerator(board).targets(move.from_sq):
            return Verdict(Rejection.ILLEGAL_FOR_PIECE_KIND)

        placed = _placed_piece(piece, move)
        if placed is None:
            return Verdict(Rejection.ILLEGAL_FOR_PIECE_KIND)

        scratch = board.copy()
        captured = scratch.move_piece(move.from_sq, move.to_sq, placed)
        if MoveGenerator(scratch).is_in_check(side_to_move):
            return Verdict(Rejection.LEAVES_KING_IN_CHECK)

        return Verdict(None, placed=placed, captured=captured)

    @staticmethod
    def reason_if_illegal(
        board: BoardView, side_to_move: Color, move: Move
    ) -> Rejection | None:
        """Rejection reason for *move*, or ``None`` if it is legal."""
        return MoveValidator.validate(board, side_to_move, move).rejection

    @staticmethod
    def is_legal(board: BoardView, side_to_move: Color, move: Move) -> bool:
        return MoveValidator.validate(board, side_to_move, move).accepted

    @staticmethod
    def legal_moves(board: BoardView, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        return [
            move
            for move in MoveGenerator(board).generate_pseudo_legal_moves(color)
            if not _exposes_king(board, color, move)
        ]

    @staticmethod
    def has_legal_move(board: BoardView, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        return any(
            not _exposes_king(board, color, move)
            for move in MoveGenerator(board).generate_pseudo_legal_moves(color)
        )


def _placed_piece(piece: Piece, move: Move) -> Piece | None:
    """Piece standing on the destination after *move*, or ``None`` if the
    promotion field does not fit the move."""
    promotes = piece.kind == PieceType.PAWN and is_promotion_square(
        piece.color, move.to_sq
    )
    if not promotes:
        return piece if move.promotion is None else None
    if move.promotion is None:
        return Piece(piece.color, PieceType.QUEEN)
    if move.promotion not in PROMOTION_TYPES:
        return None
    return Piece(piece.color, move.promotion)


def _exposes_king(board: BoardView, color: Color, move: Move) -> bool:
    piece = board[move.from_sq]
    assert piece is not None
    scratch = board.copy()
    scratch.move_piece(move.from_sq, move.to_sq, _placed_piece(piece, move))
    return MoveGenerator(scratch).is_in_check(color)

"""Tests for MoveValidator: rejection reasons and legal move lists."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType, Rejection
from chessrules.core.move import Move
from chessrules.core.notation import parse_move, position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.types import E2, E4, E7, E8
from chessrules.core.validator import MoveValidator

PINNED_BISHOP = "4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1"
ROOK_NEXT_TO_KING = "4k3/8/8/8/8/8/3r4/4K3 w - - 0 1"
PROMOTION = "k7/4P3/8/8/8/8/8/4K3 w - - 0 1"


def _reason(fen: str, text: str) -> Rejection | None:
    board, side = position_from_fen(fen)
    return MoveValidator.reason_if_illegal(board, side, parse_move(text))


def _start_reason(text: str, side: Color = Color.WHITE) -> Rejection | None:
    return MoveValidator.reason_if_illegal(Board.initial(), side, parse_move(text))


class TestRejectionReasons:
    def test_legal_opening_moves(self) -> None:
        for text in ("e2-e4", "e2-e3", "g1-f3", "b1-a3"):
            assert _start_reason(text) is None, text

    def test_no_piece_at_origin(self) -> None:
        assert _start_reason("e4-e5") == Rejection.NO_PIECE_AT_ORIGIN

    def test_wrong_turn(self) -> None:
        assert _start_reason("e7-e5") == Rejection.WRONG_TURN
        assert _start_reason("e2-e4", Color.BLACK) == Rejection.WRONG_TURN

    def test_pawn_three_squares(self) -> None:
        assert _start_reason("e2-e5") == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_pawn_diagonal_onto_empty(self) -> None:
        assert _start_reason("e2-d3") == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_capture_own_piece(self) -> None:
        assert _start_reason("a1-a2") == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_slider_cannot_jump(self) -> None:
        assert _start_reason("c1-e3") == Rejection.ILLEGAL_FOR_PIECE_KIND
        assert _start_reason("d1-d3") == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_knight_blocked_by_own_piece(self) -> None:
        assert _start_reason("g1-e2") == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_pinned_piece_exposes_king(self) -> None:
        assert _reason(PINNED_BISHOP, "e2-d3") == Rejection.LEAVES_KING_IN_CHECK

    def test_king_cannot_step_into_attack(self) -> None:
        assert _reason(ROOK_NEXT_TO_KING, "e1-e2") == Rejection.LEAVES_KING_IN_CHECK
        assert _reason(ROOK_NEXT_TO_KING, "e1-d1") == Rejection.LEAVES_KING_IN_CHECK

    def test_king_may_capture_undefended_attacker(self) -> None:
        assert _reason(ROOK_NEXT_TO_KING, "e1-d2") is None
        assert _reason(ROOK_NEXT_TO_KING, "e1-f1") is None

    def test_check_must_be_answered(self) -> None:
        fen = "4k3/8/8/8/8/8/8/r3K2N w - - 0 1"
        assert _reason(fen, "h1-g3") == Rejection.LEAVES_KING_IN_CHECK
        assert _reason(fen, "e1-e2") is None

    def test_validator_does_not_mutate(self) -> None:
        board, side = position_from_fen(PINNED_BISHOP)
        before = board.copy()
        MoveValidator.validate(board, side, parse_move("e2-d3"))
        MoveValidator.validate(board, side, parse_move("e1-d1"))
        assert board == before


class TestPromotion:
    def test_defaults_to_queen(self) -> None:
        board, side = position_from_fen(PROMOTION)
        verdict = MoveValidator.validate(board, side, Move(E7, E8))
        assert verdict.accepted
        assert verdict.placed == Piece(Color.WHITE, PieceType.QUEEN)

    def test_underpromotion(self) -> None:
        board, side = position_from_fen(PROMOTION)
        verdict = MoveValidator.validate(board, side, parse_move("e7-e8=N"))
        assert verdict.placed == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_cannot_promote_to_king(self) -> None:
        board, side = position_from_fen(PROMOTION)
        reason = MoveValidator.reason_if_illegal(
            board, side, Move(E7, E8, PieceType.KING)
        )
        assert reason == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_promotion_field_on_ordinary_move(self) -> None:
        reason = MoveValidator.reason_if_illegal(
            Board.initial(), Color.WHITE, Move(E2, E4, PieceType.QUEEN)
        )
        assert reason == Rejection.ILLEGAL_FOR_PIECE_KIND

    def test_legal_moves_include_each_promotion(self) -> None:
        board, side = position_from_fen(PROMOTION)
        # four promotions plus five king steps
        assert len(MoveValidator.legal_moves(board, side)) == 9


class TestLegalMoves:
    def test_start_position(self) -> None:
        moves = MoveValidator.legal_moves(Board.initial(), Color.WHITE)
        assert len(moves) == 20
        assert MoveValidator.has_legal_move(Board.initial(), Color.BLACK)

    def test_pinned_bishop_stays_on_file(self) -> None:
        board, side = position_from_fen(PINNED_BISHOP)
        bishop_moves = [
            m for m in MoveValidator.legal_moves(board, side) if m.from_sq == E2
        ]
        assert bishop_moves == []

    def test_every_legal_move_passes_is_legal(self) -> None:
        board, side = position_from_fen(ROOK_NEXT_TO_KING)
        for move in MoveValidator.legal_moves(board, side):
            assert MoveValidator.is_legal(board, side, move)

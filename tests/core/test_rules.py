"""Tests for Rules: check, checkmate, stalemate classification."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus
from chessrules.core.notation import position_from_fen
from chessrules.core.rules import Rules


def _status(fen: str) -> GameStatus:
    board, side = position_from_fen(fen)
    return Rules.status(board, side)


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Board.initial(), Color.WHITE)
        assert Rules.status(Board.initial(), Color.WHITE) == GameStatus.IN_PROGRESS

    def test_rook_check_with_escape(self) -> None:
        fen = "4k3/8/8/8/8/8/8/r3K3 w - - 0 1"
        board, side = position_from_fen(fen)
        assert Rules.is_in_check(board, side)
        assert not Rules.is_checkmate(board, side)
        assert _status(fen) == GameStatus.CHECK


class TestCheckmate:
    def test_fools_mate(self) -> None:
        fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        board, side = position_from_fen(fen)
        assert Rules.is_checkmate(board, side)
        assert _status(fen) == GameStatus.CHECKMATE

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        assert _status("R2k4/8/3K4/8/8/8/8/8 b - - 0 1") == GameStatus.CHECKMATE

    def test_capture_of_checker_prevents_mate(self) -> None:
        # the rook can be taken by the black king
        assert _status("3k4/3R4/8/8/8/8/8/4K3 b - - 0 1") == GameStatus.CHECK


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        fen = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
        board, side = position_from_fen(fen)
        assert Rules.is_stalemate(board, side)
        assert not Rules.is_checkmate(board, side)
        assert _status(fen) == GameStatus.STALEMATE

    def test_not_stalemate_when_has_moves(self) -> None:
        board, side = position_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(board, side)

    def test_blocked_pawn_alone_is_stalemate(self) -> None:
        # white king a1 boxed in by the queen on c2; pawn e3 blocked by e4
        assert _status("4k3/8/8/8/4p3/4P3/2q5/K7 w - - 0 1") == GameStatus.STALEMATE

"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color. White moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """Status of the side to move after the last accepted move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class Rejection(StrEnum):
    """Why a move was refused. Every member is recoverable."""

    MALFORMED_MOVE_SYNTAX = "malformed move syntax"
    NO_PIECE_AT_ORIGIN = "no piece at origin"
    WRONG_TURN = "wrong turn"
    ILLEGAL_FOR_PIECE_KIND = "illegal for piece kind"
    LEAVES_KING_IN_CHECK = "leaves king in check"
    GAME_OVER = "game over"

"""Game state machine — turn order, status tracking and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board, ReadOnlyBoard
from chessrules.core.enums import Color, GameStatus, Rejection
from chessrules.core.errors import MalformedMoveSyntax
from chessrules.core.move import Move
from chessrules.core.notation import (
    move_to_text,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, check_square
from chessrules.core.validator import MoveValidator

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single, immutable entry in the move history."""

    move: Move
    text: str
    piece: Piece
    captured: Piece | None
    status_after: GameStatus

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.status_after in (GameStatus.CHECK, GameStatus.CHECKMATE)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Answer to a move attempt: a record on success, a reason on failure."""

    move: Move | None
    rejection: Rejection | None = None
    record: MoveRecord | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @classmethod
    def rejected(cls, reason: Rejection, move: Move | None = None) -> MoveResult:
        return cls(move, rejection=reason)


class GameState:
    """Owns the board and the side to move; the only place moves are applied.

    A rejected move leaves every field untouched. Callers sharing one
    instance across threads must serialise access themselves (see
    :class:`~chessrules.game.controller.GameController`).
    """

    __slots__ = (
        "_board",
        "_view",
        "_side_to_move",
        "_status",
        "_history",
        "_start_fen",
        "_start_side",
    )

    def __init__(self, fen: str | None = None) -> None:
        self.setup(fen)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game, from the standard layout or *fen*."""
        if fen is None:
            board, side = Board.initial(), Color.WHITE
        else:
            board, side = position_from_fen(fen)
        self._board = board
        self._view = board.view()
        self._side_to_move = side
        self._history: list[MoveRecord] = []
        self._start_fen = fen
        self._start_side = side
        self._status = Rules.status(board, side)
        _LOGGER.debug("New game: %s to move, status %s", side, self._status.name)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveResult:
        """Validate *move* and, if legal, commit it and flip the turn."""
        if self._status.is_terminal:
            _LOGGER.debug("Rejected %s: game is over (%s)", move, self._status.name)
            return MoveResult.rejected(Rejection.GAME_OVER, move)

        verdict = MoveValidator.validate(self._board, self._side_to_move, move)
        if not verdict.accepted:
            _LOGGER.debug("Rejected %s: %s", move, verdict.rejection)
            return MoveResult(move, rejection=verdict.rejection)

        piece = self._board[move.from_sq]
        assert piece is not None
        self._board.move_piece(move.from_sq, move.to_sq, verdict.placed)
        self._side_to_move = self._side_to_move.opposite
        self._status = Rules.status(self._board, self._side_to_move)

        record = MoveRecord(
            move=move,
            text=move_to_text(move),
            piece=piece,
            captured=verdict.captured,
            status_after=self._status,
        )
        self._history.append(record)
        _LOGGER.debug(
            "Applied %s, %s to move, status %s",
            record.text,
            self._side_to_move,
            self._status.name,
        )
        if self._status.is_terminal:
            _LOGGER.info("Game over after %s: %s", record.text, self._status.name)
        return MoveResult(move, record=record)

    def apply_text(self, text: str) -> MoveResult:
        """Parse coordinate text (``e2-e4``) and apply it."""
        try:
            move = parse_move(text)
        except MalformedMoveSyntax as exc:
            _LOGGER.debug("Rejected %r: %s", text, exc)
            return MoveResult.rejected(exc.rejection)
        return self.apply_move(move)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> ReadOnlyBoard:
        """Live read-only view of the current position."""
        return self._view

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[check_square(sq)]

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def winner(self) -> Color | None:
        """The mating side after checkmate, otherwise ``None``."""
        if self._status == GameStatus.CHECKMATE:
            return self._side_to_move.opposite
        return None

    @property
    def move_history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    @property
    def fullmove_number(self) -> int:
        """Current full-move number, counted from the setup position."""
        offset = 1 if self._start_side == Color.BLACK else 0
        return (self.ply_count + offset) // 2 + 1

    @property
    def start_fen(self) -> str | None:
        return self._start_fen

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position (empty once the game is over)."""
        if self._status.is_terminal:
            return []
        return MoveValidator.legal_moves(self._board, self._side_to_move)

    def to_fen(self) -> str:
        return position_to_fen(self._board, self._side_to_move, self.fullmove_number)

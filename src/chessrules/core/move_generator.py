"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable

from chessrules.core.board import BoardView
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, is_valid_square, rank_of

# (file, rank) deltas.
DIAGONALS = ((1, 1), (1, -1), (-1, -1), (-1, 1))
ORTHOGONALS = ((0, 1), (1, 0), (0, -1), (-1, 0))
KNIGHT_JUMPS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Indexed by color.
_PAWN_STEP = (8, -8)
_PAWN_START_RANK = (1, 6)
_PAWN_LAST_RANK = (7, 0)

_Table = tuple[tuple[Square, ...], ...]


def _walk(sq: Square, df: int, dr: int, limit: int = 7) -> tuple[Square, ...]:
    """Up to *limit* squares from *sq* in direction (df, dr), stopping at the edge."""
    f, r = file_of(sq), rank_of(sq)
    out: list[Square] = []
    for _ in range(limit):
        f += df
        r += dr
        if not (0 <= f < 8 and 0 <= r < 8):
            break
        out.append(8 * r + f)
    return tuple(out)


def _step_table(deltas: tuple[tuple[int, int], ...]) -> _Table:
    return tuple(
        tuple(to for df, dr in deltas for to in _walk(sq, df, dr, limit=1))
        for sq in range(64)
    )


def _ray_table(directions: tuple[tuple[int, int], ...]) -> tuple[_Table, ...]:
    return tuple(
        tuple(_walk(sq, df, dr) for df, dr in directions) for sq in range(64)
    )


_KNIGHT_TARGETS = _step_table(KNIGHT_JUMPS)
_KING_TARGETS = _step_table(DIAGONALS + ORTHOGONALS)
# [color][sq] -> squares a pawn of that color on sq captures on.
_PAWN_CAPTURES = (_step_table(((-1, 1), (1, 1))), _step_table(((-1, -1), (1, -1))))

_BISHOP_RAYS = _ray_table(DIAGONALS)
_ROOK_RAYS = _ray_table(ORTHOGONALS)
_QUEEN_RAYS = _ray_table(DIAGONALS + ORTHOGONALS)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def is_promotion_square(color: Color, sq: Square) -> bool:
    """Whether a pawn of *color* arriving on *sq* must promote."""
    return rank_of(sq) == _PAWN_LAST_RANK[color]


def _is_enemy(piece: Piece | None, color: Color) -> bool:
    return piece is not None and piece.color != color


def _can_land(piece: Piece | None, color: Color) -> bool:
    return piece is None or piece.color != color


class MoveGenerator:
    """Generates pseudo-legal moves on a read-only board.

    Per-kind generation goes through the ``_DISPATCH`` table keyed by
    :class:`PieceType`; the board is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardView) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def targets(self, sq: Square) -> list[Square]:
        """Pseudo-legal destinations of the piece on *sq* (empty if none)."""
        piece = self._board[sq]
        if piece is None:
            return []
        out: list[Square] = []
        _DISPATCH[piece.kind](self, sq, piece.color, out)
        return out

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check).

        Pawn moves onto the last rank are expanded into one move per
        promotion kind.
        """
        moves: list[Move] = []
        board = self._board
        for sq in board.all_pieces(color):
            piece = board[sq]
            is_pawn = piece is not None and piece.kind == PieceType.PAWN
            for to_sq in self.targets(sq):
                if is_pawn and is_promotion_square(color, to_sq):
                    moves.extend(Move(sq, to_sq, kind) for kind in PROMOTION_TYPES)
                else:
                    moves.append(Move(sq, to_sq))
        return moves

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_square_attacked(self._board.king_square(color), color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Looks outward from *sq*: a piece of kind K attacks *sq* exactly when
        a K standing on *sq* would reach it. A pawn attacks from the squares
        an opposing pawn on *sq* would capture on.
        """
        near = (
            (_PAWN_CAPTURES[by_color.opposite][sq], (PieceType.PAWN,)),
            (_KNIGHT_TARGETS[sq], (PieceType.KNIGHT,)),
            (_KING_TARGETS[sq], (PieceType.KING,)),
        )
        for squares, kinds in near:
            if any(self._holds(s, by_color, kinds) for s in squares):
                return True

        far = (
            (_BISHOP_RAYS[sq], _DIAGONAL_ATTACKERS),
            (_ROOK_RAYS[sq], _STRAIGHT_ATTACKERS),
        )
        for rays, kinds in far:
            for ray in rays:
                blocker = self._first_occupied(ray)
                if blocker is not None and self._holds(blocker, by_color, kinds):
                    return True
        return False

    def _holds(self, sq: Square, color: Color, kinds: tuple[PieceType, ...]) -> bool:
        piece = self._board[sq]
        return piece is not None and piece.color == color and piece.kind in kinds

    def _first_occupied(self, ray: tuple[Square, ...]) -> Square | None:
        return next((s for s in ray if not self._board.is_empty(s)), None)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, out: list[Square]) -> None:
        board = self._board
        step = _PAWN_STEP[color]
        ahead = sq + step
        if is_valid_square(ahead) and board.is_empty(ahead):
            out.append(ahead)
            if rank_of(sq) == _PAWN_START_RANK[color] and board.is_empty(ahead + step):
                out.append(ahead + step)
        out.extend(
            to_sq
            for to_sq in _PAWN_CAPTURES[color][sq]
            if _is_enemy(board[to_sq], color)
        )

    def _gen_knight(self, sq: Square, color: Color, out: list[Square]) -> None:
        self._gen_steps(_KNIGHT_TARGETS[sq], color, out)

    def _gen_king(self, sq: Square, color: Color, out: list[Square]) -> None:
        self._gen_steps(_KING_TARGETS[sq], color, out)

    def _gen_bishop(self, sq: Square, color: Color, out: list[Square]) -> None:
        self._gen_sliding(_BISHOP_RAYS[sq], color, out)

    def _gen_rook(self, sq: Square, color: Color, out: list[Square]) -> None:
        self._gen_sliding(_ROOK_RAYS[sq], color, out)

    def _gen_queen(self, sq: Square, color: Color, out: list[Square]) -> None:
        self._gen_sliding(_QUEEN_RAYS[sq], color, out)

    def _gen_steps(
        self, targets: tuple[Square, ...], color: Color, out: list[Square]
    ) -> None:
        out.extend(t for t in targets if _can_land(self._board[t], color))

    def _gen_sliding(
        self, rays: tuple[tuple[Square, ...], ...], color: Color, out: list[Square]
    ) -> None:
        for ray in rays:
            stop = self._first_occupied(ray)
            if stop is None:
                out.extend(ray)
                continue
            end = ray.index(stop)
            out.extend(ray[:end])
            if _can_land(self._board[stop], color):
                out.append(stop)


_GenFn = Callable[[MoveGenerator, Square, Color, list[Square]], None]

_DISPATCH: dict[PieceType, _GenFn] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}

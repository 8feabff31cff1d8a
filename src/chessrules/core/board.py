"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidPositionError
from chessrules.core.piece import Piece
from chessrules.core.types import Square, check_square, make_square, square_name

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardView(Protocol):
    """Read access to a board, as handed to validators and renderers."""

    def __getitem__(self, sq: Square) -> Piece | None: ...

    def __iter__(self) -> Iterator[tuple[Square, Piece]]: ...

    def is_empty(self, sq: Square) -> bool: ...

    def pieces(self, color: Color, kind: PieceType) -> list[Square]: ...

    def all_pieces(self, color: Color) -> list[Square]: ...

    def count(self, color: Color, kind: PieceType) -> int: ...

    def king_square(self, color: Color) -> Square: ...

    def copy(self) -> Board: ...


class Board:
    """Mutable board: 64 cells (a1 first) and each side's king square."""

    __slots__ = ("_cells", "_kings")

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64
        # [color] -> square of that side's king, None while it is off the board.
        self._kings: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old = self._cells[check_square(sq)]
        if old is not None and old.kind == PieceType.KING:
            if self._kings[old.color] == sq:
                self._kings[old.color] = None
        self._cells[sq] = piece
        if piece is not None and piece.kind == PieceType.KING:
            self._kings[piece.color] = sq

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in index order (a1 first)."""
        for sq, piece in enumerate(self._cells):
            if piece is not None:
                yield sq, piece

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, kind: PieceType) -> list[Square]:
        return [sq for sq, p in self if p.color == color and p.kind == kind]

    def all_pieces(self, color: Color) -> list[Square]:
        return [sq for sq, p in self if p.color == color]

    def count(self, color: Color, kind: PieceType) -> int:
        return len(self.pieces(color, kind))

    def king_square(self, color: Color) -> Square:
        sq = self._kings[color]
        if sq is None:
            raise InvalidPositionError(f"No {color.name} king on board")
        return sq

    def validate(self) -> None:
        """Raise :class:`InvalidPositionError` unless the layout is playable.

        Each side needs exactly one king, and no pawn may stand on the first
        or last rank.
        """
        for color in Color:
            kings = self.count(color, PieceType.KING)
            if kings != 1:
                raise InvalidPositionError(
                    f"Expected exactly one {color.name} king, found {kings}"
                )
            for sq in self.pieces(color, PieceType.PAWN):
                if sq < 8 or sq >= 56:
                    raise InvalidPositionError(
                        f"{color.name} pawn on back rank: {square_name(sq)}"
                    )

    # -- Mutation / copying -------------------------------------------------

    def move_piece(
        self, from_sq: Square, to_sq: Square, placed: Piece | None = None
    ) -> Piece | None:
        """Lift the piece on *from_sq* onto *to_sq*; return what was captured.

        *placed* replaces the moving piece on arrival (promotion).
        """
        piece = self._cells[check_square(from_sq)]
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_sq)}")
        captured = self._cells[check_square(to_sq)]
        self[from_sq] = None
        self[to_sq] = placed or piece
        return captured

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._kings = self._kings.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * 64
        self._kings = [None, None]

    def view(self) -> ReadOnlyBoard:
        """A live window onto this board without any mutators."""
        return ReadOnlyBoard(self)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, kind in enumerate(BACK_RANK):
            b[make_square(file, 0)] = Piece(Color.WHITE, kind)
            b[make_square(file, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(file, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(file, 7)] = Piece(Color.BLACK, kind)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyBoard):
            other = other._board
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        from chessrules.core.notation.diagram import render_board

        return render_board(self)


class ReadOnlyBoard:
    """Read-only window onto a :class:`Board`.

    Reads always see the current position of the wrapped board. There is no
    ``__setitem__`` or ``move_piece``; :meth:`copy` returns a detached board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._board[sq]

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        return iter(self._board)

    def is_empty(self, sq: Square) -> bool:
        return self._board.is_empty(sq)

    def pieces(self, color: Color, kind: PieceType) -> list[Square]:
        return self._board.pieces(color, kind)

    def all_pieces(self, color: Color) -> list[Square]:
        return self._board.all_pieces(color)

    def count(self, color: Color, kind: PieceType) -> int:
        return self._board.count(color, kind)

    def king_square(self, color: Color) -> Square:
        return self._board.king_square(color)

    def copy(self) -> Board:
        return self._board.copy()

    def __eq__(self, other: object) -> bool:
        return self._board == other

    def __repr__(self) -> str:
        return repr(self._board)

"""Exceptions for programmer errors and malformed input.

Expected move rejections are not exceptions; they travel as
:class:`~chessrules.core.enums.Rejection` values.
"""

from __future__ import annotations

from chessrules.core.enums import Rejection


class ChessRulesError(Exception):
    """Base class for every exception raised by this package."""


class MalformedMoveSyntax(ChessRulesError, ValueError):
    """Move text does not follow ``<file><rank>-<file><rank>[=<piece>]``."""

    rejection = Rejection.MALFORMED_MOVE_SYNTAX

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed move: {text!r}")
        self.text = text


class InvalidPositionError(ChessRulesError, ValueError):
    """A setup position breaks a board invariant (e.g. missing king)."""

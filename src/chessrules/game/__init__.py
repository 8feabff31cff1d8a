"""Game management layer — state machine and controller.

Quick start::

    from chessrules.game import GameState

    game = GameState()
    result = game.apply_text("e2-e4")
    assert result.accepted
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.state import GameState, MoveRecord, MoveResult

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "MoveResult",
]

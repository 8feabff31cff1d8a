"""GameController — serialised access to one game plus event callbacks.

Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import GameStatus
from chessrules.core.move import Move
from chessrules.game.state import GameState, MoveRecord, MoveResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
RejectedCallback = Callable[[MoveResult], None]
GameOverCallback = Callable[[GameStatus, "GameState"], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Serialises moves into a single :class:`GameState` and notifies listeners.

    One lock per game; it is held only while the state is read or mutated,
    and listeners run after it is released so they may query the state.
    """

    __slots__ = ("_state", "_lock", "events")

    def __init__(self, fen: str | None = None) -> None:
        self._state = GameState(fen)
        self._lock = threading.Lock()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(self, fen: str | None = None) -> None:
        with self._lock:
            self._state.setup(fen)

    def submit_move(self, move: Move) -> MoveResult:
        """Apply *move*; returns the result and fires the matching events."""
        with self._lock:
            result = self._state.apply_move(move)
        self._emit(result)
        return result

    def submit_text(self, text: str) -> MoveResult:
        """Parse and apply coordinate text such as ``e2-e4``."""
        with self._lock:
            result = self._state.apply_text(text)
        self._emit(result)
        return result

    # ── Internal ─────────────────────────────────────────────────────────

    def _emit(self, result: MoveResult) -> None:
        if result.record is None:
            for rejected_cb in self.events.on_rejected:
                rejected_cb(result)
            return

        for move_cb in self.events.on_move:
            move_cb(result.record, self._state)

        status = result.record.status_after
        if status.is_terminal:
            _LOGGER.debug(
                "Notifying %d game-over listener(s): %s",
                len(self.events.on_game_over),
                status.name,
            )
            for game_over_cb in self.events.on_game_over:
                game_over_cb(status, self._state)

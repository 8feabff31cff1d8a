"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game.state import GameState

FOOLS_MATE = ("f2-f3", "e7-e5", "g2-g4", "d8-h4")


@pytest.fixture
def game() -> GameState:
    """A fresh game in the standard starting position."""
    return GameState()


@pytest.fixture
def mated_game() -> GameState:
    """A game that ended in fool's mate (black wins)."""
    gs = GameState()
    for text in FOOLS_MATE:
        assert gs.apply_text(text).accepted, text
    return gs

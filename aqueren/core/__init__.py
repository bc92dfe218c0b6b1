"""
Core domain layer for Aqueren.

Exposes the game engine primitives and the exception hierarchy.
"""

from aqueren.core.exceptions import (
    AquerenError,
    DecodeError,
    InvalidActionError,
    ReplayInconsistencyError,
)
from aqueren.core.game import Game, GameConfig, Player, PlayerId, TurnState, create_game

__all__ = [
    "AquerenError",
    "DecodeError",
    "InvalidActionError",
    "ReplayInconsistencyError",
    "Game",
    "GameConfig",
    "Player",
    "PlayerId",
    "TurnState",
    "create_game",
]

"""
Custom exception hierarchy for the Aqueren engine and services.

Provides typed errors that can be handled consistently across
the core engine, services, and API layer.
"""

from typing import Optional


class AquerenError(Exception):
    """Base exception for all game-related errors."""


class InvalidActionError(AquerenError):
    """Action is not legal in the current state."""


class DecodeError(AquerenError):
    """An action payload could not be decoded."""


class ReplayInconsistencyError(AquerenError):
    """
    An already accepted action log no longer replays.

    The log only ever receives actions that were valid when appended, so this
    means the stored history or the initial snapshot is corrupt.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

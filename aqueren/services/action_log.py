"""
Append-only action log storage.

Two interchangeable backends: a plain list for a single server process, and
a SQLAlchemy-backed log that survives restarts.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Protocol

from aqueren.core.exceptions import DecodeError, ReplayInconsistencyError
from aqueren.core.game.actions import Action, action_from_dict, action_to_dict
from aqueren.data import GameRepository, session_scope

logger = logging.getLogger(__name__)


class ActionLog(Protocol):
    """Ordered, append-only list of accepted actions."""

    def entries(self) -> List[Action]:
        ...

    def append(self, action: Action) -> None:
        ...

    def __len__(self) -> int:
        ...


class InMemoryActionLog:
    """Action log kept in process memory."""

    def __init__(self, actions: List[Action] | None = None):
        self._actions: List[Action] = list(actions or [])

    def entries(self) -> List[Action]:
        return list(self._actions)

    def append(self, action: Action) -> None:
        self._actions.append(action)

    def __len__(self) -> int:
        return len(self._actions)


class SqlActionLog:
    """Action log stored in the game_actions table."""

    def __init__(self, game_uuid: uuid.UUID):
        self.game_uuid = game_uuid

    def entries(self) -> List[Action]:
        with session_scope() as session:
            payloads = GameRepository(session).list_actions(self.game_uuid)
        actions: List[Action] = []
        for index, payload in enumerate(payloads):
            try:
                actions.append(action_from_dict(payload))
            except DecodeError as e:
                raise ReplayInconsistencyError(
                    f"Stored action {index} cannot be decoded: {e}", index=index
                ) from e
        return actions

    def append(self, action: Action) -> None:
        with session_scope() as session:
            repo = GameRepository(session)
            sequence_number = repo.count_actions(self.game_uuid)
            repo.append_action(self.game_uuid, sequence_number, action_to_dict(action))

    def __len__(self) -> int:
        with session_scope() as session:
            return GameRepository(session).count_actions(self.game_uuid)

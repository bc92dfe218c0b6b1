"""
Repository pattern for game data operations.

Encapsulates all database queries for games and their action logs.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from aqueren.data.models import ActionRecord, GameRecord

logger = logging.getLogger(__name__)


class GameRepository:
    """
    Repository for game-related database operations.

    Games are stored event-sourced: an initial snapshot plus an ordered,
    append-only list of actions.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with a database session.

        Args:
            session: Active SQLAlchemy session
        """
        self.session = session

    # ---- Game Operations ----

    def create_game(
        self,
        game_id: str,
        initial_state: Dict[str, Any],
        seed: Optional[int] = None,
    ) -> GameRecord:
        """
        Create a new game record.

        Args:
            game_id: Human-readable game identifier
            initial_state: serialize_game() output of the initial deal
            seed: Seed used for the deal, if any

        Returns:
            Created GameRecord
        """
        game = GameRecord(game_id=game_id, initial_state=initial_state, seed=seed)
        self.session.add(game)
        self.session.flush()  # Get the UUID assigned
        logger.info(f"Created game: {game_id} (UUID: {game.id})")
        return game

    def get_game_by_id(self, game_id: str) -> Optional[GameRecord]:
        """Fetch game by human-readable game_id, or None."""
        stmt = select(GameRecord).where(GameRecord.game_id == game_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def delete_game(self, game_id: str) -> bool:
        """Delete a game and its log. Returns False if it did not exist."""
        game = self.get_game_by_id(game_id)
        if game is None:
            return False
        self.session.delete(game)
        self.session.flush()
        logger.info(f"Deleted game: {game_id}")
        return True

    # ---- Action Log Operations ----

    def append_action(
        self,
        game_uuid: uuid.UUID,
        sequence_number: int,
        payload: Dict[str, Any],
    ) -> ActionRecord:
        """
        Append one encoded action to a game's log.

        Args:
            game_uuid: Game UUID
            sequence_number: Expected position in the log
            payload: action_to_dict() encoding

        Returns:
            Created ActionRecord
        """
        record = ActionRecord(
            game_uuid=game_uuid,
            sequence_number=sequence_number,
            action_type=payload["type"],
            player_id=payload["player"],
            payload=payload,
        )
        self.session.add(record)
        self.session.flush()
        logger.debug(f"Appended action {sequence_number} ({payload['type']}) to game {game_uuid}")
        return record

    def list_actions(self, game_uuid: uuid.UUID) -> List[Dict[str, Any]]:
        """Encoded actions of a game, in log order."""
        stmt = (
            select(ActionRecord.payload)
            .where(ActionRecord.game_uuid == game_uuid)
            .order_by(ActionRecord.sequence_number)
        )
        return list(self.session.execute(stmt).scalars().all())

    def count_actions(self, game_uuid: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(ActionRecord).where(ActionRecord.game_uuid == game_uuid)
        return self.session.execute(stmt).scalar_one()

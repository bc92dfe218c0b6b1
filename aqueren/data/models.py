"""
SQLAlchemy models for Aqueren.

Architecture:
- GameRecord: one row per game, holding the initial snapshot
- ActionRecord: append-only action log; the current game is the initial
  snapshot replayed over these rows in sequence order
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


def utc_now() -> datetime:
    """Generate timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class GameRecord(Base):
    """
    Game metadata table.

    The game state itself is never stored; it is reconstructed from the
    initial snapshot and the ActionRecord rows.
    """

    __tablename__ = "games"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    game_id: Mapped[str] = mapped_column(
        String(128),
        unique=True,
        nullable=False,
        index=True,
        comment="Human-readable game ID from settings",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    seed: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    initial_state: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Full serialized Game the log is replayed from",
    )

    actions: Mapped[List["ActionRecord"]] = relationship(
        "ActionRecord",
        back_populates="game",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="noload",  # Actions loaded explicitly via repository
        order_by="ActionRecord.sequence_number",
    )

    def __repr__(self) -> str:
        return f"<GameRecord(game_id={self.game_id!r})>"


class ActionRecord(Base):
    """
    One accepted action.

    Stored with its resolved outcome (e.g. the tile drawn), so replay never
    consults randomness.
    """

    __tablename__ = "game_actions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    game_uuid: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False,
    )

    sequence_number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Position in the game's log, starting at 0",
    )

    action_type: Mapped[str] = mapped_column(String(32), nullable=False)

    player_id: Mapped[int] = mapped_column(Integer, nullable=False)

    payload: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="action_to_dict() encoding of the action",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    game: Mapped["GameRecord"] = relationship("GameRecord", back_populates="actions")

    __table_args__ = (
        UniqueConstraint("game_uuid", "sequence_number", name="uq_game_action_sequence"),
        Index("ix_game_actions_game_sequence", "game_uuid", "sequence_number"),
    )

    def __repr__(self) -> str:
        return (
            f"<ActionRecord(game_uuid={self.game_uuid}, seq={self.sequence_number}, "
            f"type={self.action_type!r})>"
        )

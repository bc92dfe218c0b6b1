from aqueren.data.config import DatabaseSettings, get_settings
from aqueren.data.models import ActionRecord, Base, GameRecord
from aqueren.data.repository import GameRepository
from aqueren.data.session import (
    close_db,
    create_tables,
    drop_tables,
    get_engine,
    init_db,
    session_scope,
)

__all__ = [
    "DatabaseSettings",
    "get_settings",
    "ActionRecord",
    "Base",
    "GameRecord",
    "GameRepository",
    "close_db",
    "create_tables",
    "drop_tables",
    "get_engine",
    "init_db",
    "session_scope",
]

"""
Application services layer.

Provides use-case oriented services that glue the core engine with the
action log and its persistence.
"""

from .action_log import ActionLog, InMemoryActionLog, SqlActionLog
from .game_service import GameService, parse_hotels

__all__ = ["ActionLog", "GameService", "InMemoryActionLog", "SqlActionLog", "parse_hotels"]

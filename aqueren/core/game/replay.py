"""
Replay model: the current game is the initial snapshot folded over the log.
"""

import logging
from typing import Iterable, Optional

from aqueren.core.exceptions import InvalidActionError, ReplayInconsistencyError
from aqueren.core.game.actions import Action
from aqueren.core.game.config import GameConfig
from aqueren.core.game.game import Game
from aqueren.core.game.rules import apply_action

logger = logging.getLogger(__name__)


def compute_state(
    initial: Game, actions: Iterable[Action], config: Optional[GameConfig] = None
) -> Game:
    """
    Replay `actions` on top of `initial`.

    Raises:
        ReplayInconsistencyError: if any logged action is rejected. Logged
            actions were valid when appended, so this signals corruption
            rather than a user error.
    """
    game = initial
    for index, action in enumerate(actions):
        try:
            game = apply_action(game, action, config)
        except (InvalidActionError, ValueError) as e:
            # ValueError: the hands and pool of the snapshot disagree with the log
            logger.error(f"Replay failed at entry {index} ({action!r}): {e}")
            raise ReplayInconsistencyError(
                f"Action log entry {index} no longer applies: {e}", index=index
            ) from e
    return game

"""
GameService owns one game: its initial snapshot, its action log and the
lock that serializes every read and write.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, List, Optional, Sequence

from aqueren.core.exceptions import DecodeError, InvalidActionError, ReplayInconsistencyError
from aqueren.core.game import (
    Action,
    ActionType,
    BuyStocks,
    DrawTile,
    FoundChain,
    Game,
    GameConfig,
    Hotel,
    PlaceTile,
    Tile,
    apply_action,
    compute_state,
    create_game,
    get_legal_actions,
    resolve_draw,
)
from aqueren.core.game.game import tile_partition_errors
from aqueren.core.snapshot import deserialize_game, serialize_game
from aqueren.data import GameRepository, session_scope
from aqueren.services.action_log import ActionLog, InMemoryActionLog, SqlActionLog

logger = logging.getLogger(__name__)


class GameService:
    """
    Use-case service for playing one game.

    Every request runs the same critical section under a single lock:
    replay the log over the initial snapshot, validate and apply the new
    action against that state, and append it only if it was accepted.
    """

    def __init__(
        self,
        initial_game: Game,
        log: Optional[ActionLog] = None,
        *,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        game_id: str = "default",
    ):
        self.game_id = game_id
        self.config = config or GameConfig()
        self.initial_game = initial_game
        self.log: ActionLog = log if log is not None else InMemoryActionLog()
        self._rng = rng or random.Random(self.config.seed)
        self._lock = threading.Lock()

    # ---- Construction ----

    @classmethod
    def new_game(cls, config: Optional[GameConfig] = None, *, game_id: str = "default") -> "GameService":
        """Deal a fresh game with an in-memory log."""
        config = config or GameConfig()
        rng = random.Random(config.seed)
        game = create_game(config, rng)
        logger.info(f"Dealt new game {game_id} (seed={config.seed})")
        return cls(game, InMemoryActionLog(), config=config, rng=rng, game_id=game_id)

    @classmethod
    def open_persistent(cls, config: Optional[GameConfig] = None, *, game_id: str = "default") -> "GameService":
        """
        Resume `game_id` from the database, or deal and store it if missing.

        The database must already be initialized (see aqueren.data.init_db).
        """
        config = config or GameConfig()
        rng = random.Random(config.seed)
        with session_scope() as session:
            repo = GameRepository(session)
            record = repo.get_game_by_id(game_id)
            if record is None:
                game = create_game(config, rng)
                record = repo.create_game(game_id, serialize_game(game), seed=config.seed)
                logger.info(f"Stored new game {game_id}")
            else:
                game = deserialize_game(record.initial_state)
                problems = tile_partition_errors(game)
                if problems:
                    logger.error(f"Stored game {game_id} has a broken tile partition: {problems}")
                    raise ReplayInconsistencyError(
                        f"Stored initial state of {game_id} is corrupt: " + "; ".join(problems)
                    )
                logger.info(f"Resuming stored game {game_id}")
            game_uuid = record.id
        return cls(game, SqlActionLog(game_uuid), config=config, rng=rng, game_id=game_id)

    # ---- Queries ----

    def current_state(self) -> Game:
        """Replay the log and return the current game."""
        with self._lock:
            return self._replay()

    def actions(self) -> List[Action]:
        with self._lock:
            return self.log.entries()

    # ---- Commands ----

    def submit(self, action: Action) -> Game:
        """
        Validate `action` against the current game and append it if legal.

        A DrawTile without a tile is resolved here by drawing from the pool,
        so the logged entry records which tile was taken.

        Raises:
            InvalidActionError: the action is illegal; the log is untouched.
            ReplayInconsistencyError: the stored log no longer replays.
        """
        return self._play(lambda game: action)

    def place_tile(self, tile: Tile) -> Game:
        """Place `tile` for the current turn holder."""
        return self._play(lambda game: PlaceTile(game.turn, tile))

    def buy_stocks(self, hotels: Sequence[Hotel]) -> Game:
        return self._play(lambda game: BuyStocks(game.turn, tuple(hotels)))

    def found_chain(self, hotel: Hotel) -> Game:
        return self._play(lambda game: FoundChain(game.turn, hotel))

    def draw_tile(self) -> Game:
        return self._play(lambda game: DrawTile(game.turn, None))

    # ---- Internals ----

    def _replay(self) -> Game:
        return compute_state(self.initial_game, self.log.entries(), self.config)

    def _play(self, build: Callable[[Game], Action]) -> Game:
        with self._lock:
            game = self._replay()
            action = build(game)
            if (
                isinstance(action, DrawTile)
                and action.tile is None
                and game.pool
                and ActionType.DRAW_TILE in get_legal_actions(game, action.player)
            ):
                # only legal draws consume the seeded rng
                action = resolve_draw(game, action.player, self._rng)
            try:
                new_game = apply_action(game, action, self.config)
            except InvalidActionError as e:
                logger.info(f"Rejected {action!r}: {e}")
                raise
            self.log.append(action)
            logger.info(f"Accepted {action!r} (log length {len(self.log)})")
            return new_game


def parse_hotels(names: Sequence[Optional[str]]) -> List[Hotel]:
    """
    Turn wire hotel names into hotels; None entries are empty slots.

    Raises:
        DecodeError: for unknown names.
    """
    hotels = []
    for name in names:
        if name is None:
            continue
        try:
            hotels.append(Hotel.parse(name))
        except ValueError as e:
            raise DecodeError(str(e)) from e
    return hotels

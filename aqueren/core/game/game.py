"""
Game snapshot type and initial deal.
"""

import random
from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

from aqueren.core.game.board import Board
from aqueren.core.game.config import GameConfig
from aqueren.core.game.player import Player, PlayerId
from aqueren.core.game.tiles import TILES, Tile, all_tiles, choose_tiles

PLAYERS = len(PlayerId)


class TurnState(Enum):
    """Where the turn holder is within their turn."""

    PLACING = "Placing"
    BUYING_OR_DRAWING = "BuyingOrDrawing"
    DRAWING = "Drawing"
    CREATING_CHAIN = "CreatingChain"
    MERGING = "Merging"


@dataclass(frozen=True)
class Game:
    """
    The complete, authoritative state of a game.

    Values are never mutated; each accepted action produces a new Game.
    """

    players: Tuple[Player, ...]
    board: Board
    turn: PlayerId = PlayerId.ONE
    turn_state: TurnState = TurnState.PLACING
    pool: Tuple[Tile, ...] = ()
    last_placed: Optional[Tile] = None

    def __post_init__(self) -> None:
        ids = [p.id for p in self.players]
        if ids != list(PlayerId):
            raise ValueError(f"Game needs players {[p.value for p in PlayerId]} in order, got {ids}")

    def get_player(self, player_id: PlayerId) -> Player:
        return self.players[player_id.value - 1]

    def get_current_player(self) -> Player:
        """Get the turn holder."""
        return self.get_player(self.turn)

    def with_player(self, player: Player) -> "Game":
        """Return a new game with `player` replacing the seat of the same id."""
        players = list(self.players)
        players[player.id.value - 1] = player
        return replace(self, players=tuple(players))


def create_game(config: GameConfig, rng: Optional[random.Random] = None) -> Game:
    """
    Deal a new game.

    Four tiles go straight onto the board (one per seat, not attributed to
    anyone), then each player in seat order is dealt a hand from the same
    pool.
    """
    rng = rng or random.Random(config.seed)
    starting, pool = choose_tiles(all_tiles(), PLAYERS, rng)
    players: List[Player] = []
    for player_id in PlayerId:
        hand, pool = choose_tiles(pool, config.hand_size, rng)
        players.append(Player(player_id, config.starting_money, tiles=hand))
    return Game(
        players=tuple(players),
        board=Board.with_tiles(starting),
        pool=pool,
    )


def tile_partition_errors(game: Game) -> List[str]:
    """
    Check that board, hands and pool hold every tile exactly once.

    Returns a list of problems; empty when the partition holds.
    """
    counts: Counter = Counter(game.board.placed_tiles())
    for player in game.players:
        counts.update(player.tiles)
    counts.update(game.pool)

    problems = [f"{tile!r} appears {n} times" for tile, n in sorted(counts.items()) if n > 1]
    missing = set(all_tiles()) - set(counts)
    problems.extend(f"{tile!r} is missing" for tile in sorted(missing))
    if not problems and sum(counts.values()) != TILES:
        problems.append(f"expected {TILES} tiles, found {sum(counts.values())}")
    return problems

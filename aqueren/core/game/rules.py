"""
High-level rules API for controlling game flow.

`apply_action` is the authoritative transition function: it maps a game
and an action onto the next game, or raises InvalidActionError and leaves
the input untouched.
"""

import random
from dataclasses import replace
from typing import List, Optional, Sequence

from aqueren.core.exceptions import InvalidActionError
from aqueren.core.game.actions import (
    Action,
    ActionType,
    BuyStocks,
    DrawTile,
    EndGame,
    FoundChain,
    HandleMergeStocks,
    PlaceTile,
)
from aqueren.core.game.chains import analyze_placement
from aqueren.core.game.config import GameConfig
from aqueren.core.game.game import Game, TurnState
from aqueren.core.game.hotels import Hotel, stock_price
from aqueren.core.game.player import PlayerId
from aqueren.core.game.tiles import Tile

DEFAULT_CONFIG = GameConfig()


def share_price(game: Game, hotel: Hotel) -> int:
    """Current price of one share of `hotel`."""
    return stock_price(hotel, game.board.chain_size(hotel))


def purchase_cost(game: Game, hotels: Sequence[Hotel]) -> int:
    """
    Total cost of buying one share per entry in `hotels`.

    Every share is charged at the price before the purchase; buying several
    shares of one hotel does not raise its price mid-purchase.
    """
    return sum(share_price(game, h) for h in hotels)


def get_legal_actions(game: Game, player_id: PlayerId) -> List[ActionType]:
    """
    Action types the given player may submit right now.

    Only the turn holder ever has legal actions.
    """
    if player_id != game.turn:
        return []
    if game.turn_state == TurnState.PLACING:
        return [ActionType.PLACE_TILE]
    if game.turn_state == TurnState.CREATING_CHAIN:
        return [ActionType.FOUND_CHAIN]
    if game.turn_state == TurnState.BUYING_OR_DRAWING:
        return [ActionType.BUY_STOCKS, ActionType.DRAW_TILE]
    if game.turn_state == TurnState.DRAWING:
        return [ActionType.DRAW_TILE]
    return []


def apply_action(game: Game, action: Action, config: Optional[GameConfig] = None) -> Game:
    """
    Apply one action and return the resulting game.

    Raises:
        InvalidActionError: if the action is not legal in `game`.
    """
    config = config or DEFAULT_CONFIG
    if isinstance(action, PlaceTile):
        return place_tile(game, action.player, action.tile)
    if isinstance(action, FoundChain):
        return found_chain(game, action.player, action.hotel, config)
    if isinstance(action, BuyStocks):
        return buy_stocks(game, action.player, action.hotels, config)
    if isinstance(action, DrawTile):
        return draw_tile(game, action.player, action.tile)
    if isinstance(action, (HandleMergeStocks, EndGame)):
        raise InvalidActionError(
            f"Action {action.action_type.value} is not supported: merger resolution and "
            f"game end are not implemented"
        )
    raise InvalidActionError(f"Unknown action: {action!r}")


def _require_turn(game: Game, player_id: PlayerId, what: str) -> None:
    if game.turn != player_id:
        raise InvalidActionError(
            f"Error {what}: player {player_id.value} does not have turn "
            f"(player {game.turn.value} does)"
        )


def _require_state(game: Game, what: str, *states: TurnState) -> None:
    if game.turn_state not in states:
        if game.turn_state == TurnState.MERGING:
            raise InvalidActionError(
                f"Error {what}: game is waiting on a merger, which is not supported yet"
            )
        expected = " or ".join(s.value for s in states)
        raise InvalidActionError(
            f"Error {what}: turn state is {game.turn_state.value}, expected {expected}"
        )


def place_tile(game: Game, player_id: PlayerId, tile: Tile) -> Game:
    """Move a tile from the turn holder's hand onto the board."""
    what = "placing tile"
    _require_turn(game, player_id, what)
    _require_state(game, what, TurnState.PLACING)
    player = game.get_player(player_id)
    if not player.has_tile(tile):
        raise InvalidActionError(f"Error {what}: player {player_id.value} does not have tile {tile.label()}")
    if game.board.slot_for(tile).has_tile:
        raise InvalidActionError(f"Error {what}: {tile.label()} is already on the board")

    board = game.board.place_tile(tile)
    outcome = analyze_placement(board, tile)
    if outcome.turn_state == TurnState.CREATING_CHAIN and len(board.active_hotels()) == len(Hotel):
        raise InvalidActionError(
            f"Error {what}: {tile.label()} would found a new chain but all hotels are on the board"
        )
    if outcome.hotel is not None:
        board = board.assign_hotel(outcome.group, outcome.hotel)

    game = game.with_player(player.remove_tile(tile))
    return replace(game, board=board, turn_state=outcome.turn_state, last_placed=tile)


def found_chain(game: Game, player_id: PlayerId, hotel: Hotel, config: GameConfig) -> Game:
    """
    Name the chain created by the tile just placed.

    The placed tile and every unincorporated tile connected to it take the
    hotel; the founder receives the bonus share(s).
    """
    what = "founding chain"
    _require_turn(game, player_id, what)
    _require_state(game, what, TurnState.CREATING_CHAIN)
    if hotel in game.board.active_hotels():
        raise InvalidActionError(f"Error {what}: {hotel.value} is already on the board")
    if game.last_placed is None:
        raise InvalidActionError(f"Error {what}: no tile was placed this turn")

    outcome = analyze_placement(game.board, game.last_placed)
    board = game.board.assign_hotel(outcome.group, hotel)
    player = game.get_player(player_id)
    if config.founder_bonus_shares:
        player = replace(player, shares=player.shares.add(hotel, config.founder_bonus_shares))
    game = game.with_player(player)
    return replace(game, board=board, turn_state=TurnState.BUYING_OR_DRAWING)


def buy_stocks(game: Game, player_id: PlayerId, hotels: Sequence[Hotel], config: GameConfig) -> Game:
    """Buy up to `config.max_stocks_per_turn` shares and move on to drawing."""
    what = "buying stocks"
    _require_turn(game, player_id, what)
    _require_state(game, what, TurnState.BUYING_OR_DRAWING)
    if len(hotels) > config.max_stocks_per_turn:
        raise InvalidActionError(
            f"Error {what}: at most {config.max_stocks_per_turn} shares per turn, got {len(hotels)}"
        )
    player = game.get_player(player_id)
    cost = purchase_cost(game, hotels)
    if not player.can_afford(cost):
        raise InvalidActionError(f"Error {what}: shares cost {cost} but player {player_id.value} has {player.money}")

    shares = player.shares
    for hotel in hotels:
        shares = shares.add(hotel)
    game = game.with_player(replace(player, money=player.money - cost, shares=shares))
    return replace(game, turn_state=TurnState.DRAWING)


def draw_tile(game: Game, player_id: PlayerId, tile: Optional[Tile]) -> Game:
    """
    Move `tile` from the pool into the turn holder's hand and end the turn.

    `tile` may only be None when the pool is empty; the turn still ends.
    """
    what = "drawing tile"
    _require_turn(game, player_id, what)
    _require_state(game, what, TurnState.DRAWING, TurnState.BUYING_OR_DRAWING)

    player = game.get_player(player_id)
    pool = game.pool
    if tile is None:
        if pool:
            raise InvalidActionError(f"Error {what}: a tile must be drawn while the pool is not empty")
    else:
        if tile not in pool:
            raise InvalidActionError(f"Error {what}: {tile.label()} is not in the pool")
        pool = tuple(t for t in pool if t != tile)
        player = player.add_tile(tile)

    game = game.with_player(player)
    return replace(
        game,
        pool=pool,
        turn=game.turn.next(),
        turn_state=TurnState.PLACING,
        last_placed=None,
    )


def resolve_draw(game: Game, player_id: PlayerId, rng: random.Random) -> DrawTile:
    """
    Pick the tile a draw will take, uniformly from the pool.

    The returned action carries the tile so that replaying it never consults
    randomness again.
    """
    if not game.pool:
        return DrawTile(player_id, None)
    return DrawTile(player_id, game.pool[rng.randrange(len(game.pool))])

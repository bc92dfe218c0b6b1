"""
Player actions and their JSON-friendly encoding.

Every action names the player performing it. Actions that consume
randomness carry their resolved outcome (DrawTile.tile), so a log of
actions replays to the same game every time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from aqueren.core.exceptions import DecodeError
from aqueren.core.game.hotels import Hotel
from aqueren.core.game.player import PlayerId
from aqueren.core.game.tiles import Tile


class ActionType(Enum):
    """Types of actions a player can take."""

    PLACE_TILE = "place_tile"
    BUY_STOCKS = "buy_stocks"
    DRAW_TILE = "draw_tile"
    FOUND_CHAIN = "found_chain"
    HANDLE_MERGE_STOCKS = "handle_merge_stocks"
    END_GAME = "end_game"


@dataclass(frozen=True)
class PlaceTile:
    player: PlayerId
    tile: Tile

    action_type: ClassVar[ActionType] = ActionType.PLACE_TILE


@dataclass(frozen=True)
class BuyStocks:
    """Buy one share per entry in `hotels`; repeats buy several of one hotel."""

    player: PlayerId
    hotels: Tuple[Hotel, ...] = ()

    action_type: ClassVar[ActionType] = ActionType.BUY_STOCKS


@dataclass(frozen=True)
class DrawTile:
    """Draw `tile` from the pool. `tile` is None only when the pool is empty."""

    player: PlayerId
    tile: Optional[Tile] = None

    action_type: ClassVar[ActionType] = ActionType.DRAW_TILE


@dataclass(frozen=True)
class FoundChain:
    """Name the chain formed by the tile just placed."""

    player: PlayerId
    hotel: Hotel

    action_type: ClassVar[ActionType] = ActionType.FOUND_CHAIN


@dataclass(frozen=True)
class HandleMergeStocks:
    player: PlayerId
    hold: int = 0
    sell: int = 0
    trade: int = 0

    action_type: ClassVar[ActionType] = ActionType.HANDLE_MERGE_STOCKS


@dataclass(frozen=True)
class EndGame:
    player: PlayerId

    action_type: ClassVar[ActionType] = ActionType.END_GAME


Action = Union[PlaceTile, BuyStocks, DrawTile, FoundChain, HandleMergeStocks, EndGame]


def tile_to_dict(tile: Tile) -> Dict[str, int]:
    return {"row": tile.row, "col": tile.col}


def tile_from_dict(data: Any) -> Tile:
    if not isinstance(data, dict):
        raise DecodeError(f"Tile must be an object with row and col, got {data!r}")
    row, col = data.get("row"), data.get("col")
    if not isinstance(row, int) or not isinstance(col, int) or isinstance(row, bool) or isinstance(col, bool):
        raise DecodeError(f"Tile row and col must be integers, got {data!r}")
    try:
        return Tile(row, col)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def action_to_dict(action: Action) -> Dict[str, Any]:
    """Encode an action as a plain dict (stable log/wire format)."""
    data: Dict[str, Any] = {"type": action.action_type.value, "player": action.player.value}
    if isinstance(action, PlaceTile):
        data["tile"] = tile_to_dict(action.tile)
    elif isinstance(action, BuyStocks):
        data["hotels"] = [h.value for h in action.hotels]
    elif isinstance(action, DrawTile):
        data["tile"] = tile_to_dict(action.tile) if action.tile is not None else None
    elif isinstance(action, FoundChain):
        data["hotel"] = action.hotel.value
    elif isinstance(action, HandleMergeStocks):
        data.update(hold=action.hold, sell=action.sell, trade=action.trade)
    return data


def _player(data: Dict[str, Any]) -> PlayerId:
    try:
        return PlayerId(data["player"])
    except (KeyError, ValueError, TypeError) as e:
        raise DecodeError(f"Invalid or missing player: {data.get('player')!r}") from e


def _hotel(value: Any) -> Hotel:
    if not isinstance(value, str):
        raise DecodeError(f"Hotel must be a name, got {value!r}")
    try:
        return Hotel.parse(value)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def _count(data: Dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise DecodeError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def action_from_dict(data: Any) -> Action:
    """
    Decode an action produced by `action_to_dict`.

    Raises:
        DecodeError: if the payload is malformed or names an unknown action.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Action must be an object, got {type(data).__name__}")
    try:
        action_type = ActionType(data.get("type"))
    except ValueError:
        raise DecodeError(f"Unknown action type: {data.get('type')!r}") from None

    player = _player(data)

    if action_type == ActionType.PLACE_TILE:
        return PlaceTile(player, tile_from_dict(data.get("tile")))
    if action_type == ActionType.BUY_STOCKS:
        hotels = data.get("hotels", [])
        if not isinstance(hotels, list):
            raise DecodeError(f"hotels must be a list, got {hotels!r}")
        # null entries are empty purchase slots
        return BuyStocks(player, tuple(_hotel(h) for h in hotels if h is not None))
    if action_type == ActionType.DRAW_TILE:
        tile = data.get("tile")
        return DrawTile(player, tile_from_dict(tile) if tile is not None else None)
    if action_type == ActionType.FOUND_CHAIN:
        return FoundChain(player, _hotel(data.get("hotel")))
    if action_type == ActionType.HANDLE_MERGE_STOCKS:
        return HandleMergeStocks(
            player, hold=_count(data, "hold"), sell=_count(data, "sell"), trade=_count(data, "trade")
        )
    return EndGame(player)

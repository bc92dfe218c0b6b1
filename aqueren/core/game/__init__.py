from aqueren.core.game.actions import (
    Action,
    ActionType,
    BuyStocks,
    DrawTile,
    EndGame,
    FoundChain,
    HandleMergeStocks,
    PlaceTile,
    action_from_dict,
    action_to_dict,
)
from aqueren.core.game.board import Board, Slot
from aqueren.core.game.config import GameConfig
from aqueren.core.game.game import Game, TurnState, create_game
from aqueren.core.game.hotels import Hotel, HotelTier, stock_price
from aqueren.core.game.player import Player, PlayerId, PlayerShares
from aqueren.core.game.replay import compute_state
from aqueren.core.game.rules import apply_action, get_legal_actions, resolve_draw
from aqueren.core.game.tiles import COLS, ROWS, TILES, Tile

__all__ = [
    "Action",
    "ActionType",
    "BuyStocks",
    "DrawTile",
    "EndGame",
    "FoundChain",
    "HandleMergeStocks",
    "PlaceTile",
    "action_from_dict",
    "action_to_dict",
    "Board",
    "Slot",
    "GameConfig",
    "Game",
    "TurnState",
    "create_game",
    "Hotel",
    "HotelTier",
    "stock_price",
    "Player",
    "PlayerId",
    "PlayerShares",
    "compute_state",
    "apply_action",
    "get_legal_actions",
    "resolve_draw",
    "COLS",
    "ROWS",
    "TILES",
    "Tile",
]

"""
Snapshot serialization of Game.

`serialize_snapshot` produces the public JSON view served at /state.
`serialize_game` / `deserialize_game` round-trip the complete game,
including the undrawn pool, for persisting initial snapshots.
"""

from __future__ import annotations

from typing import Any, Dict, List

from aqueren.core.exceptions import DecodeError
from aqueren.core.game.actions import tile_from_dict, tile_to_dict
from aqueren.core.game.board import Board, Slot
from aqueren.core.game.game import Game, TurnState
from aqueren.core.game.hotels import Hotel
from aqueren.core.game.player import Player, PlayerId, PlayerShares


def serialize_snapshot(game: Game) -> Dict[str, Any]:
    """Serialize a Game into a stable JSON dict.

    The snapshot includes:
    - players with money, shares and hands
    - board.slots: all 108 slots, row-major
    - turn (player id) and turn_state (state name)
    - tiles_remaining: size of the undrawn pool (its order stays hidden)
    """
    players: List[Dict[str, Any]] = [
        {
            "id": p.id.value,
            "money": p.money,
            "shares": p.shares.as_dict(),
            "tiles": [tile_to_dict(t) for t in p.tiles],
        }
        for p in game.players
    ]
    slots = [
        {
            "row": s.row,
            "col": s.col,
            "has_tile": s.has_tile,
            "hotel": s.hotel.value if s.hotel is not None else None,
        }
        for s in game.board.slots
    ]
    return {
        "players": players,
        "board": {"slots": slots},
        "turn": game.turn.value,
        "turn_state": game.turn_state.value,
        "tiles_remaining": len(game.pool),
    }


def serialize_game(game: Game) -> Dict[str, Any]:
    """Full serialization, including the pool order and the last placed tile."""
    data = serialize_snapshot(game)
    data["pool"] = [tile_to_dict(t) for t in game.pool]
    data["last_placed"] = tile_to_dict(game.last_placed) if game.last_placed else None
    del data["tiles_remaining"]
    return data


def deserialize_game(data: Dict[str, Any]) -> Game:
    """
    Rebuild a Game from `serialize_game` output.

    Raises:
        DecodeError: if the payload is malformed.
    """
    try:
        players = tuple(
            Player(
                id=PlayerId(p["id"]),
                money=int(p["money"]),
                shares=PlayerShares(**p["shares"]),
                tiles=tuple(tile_from_dict(t) for t in p["tiles"]),
            )
            for p in data["players"]
        )
        board = Board(
            tuple(
                Slot(
                    row=s["row"],
                    col=s["col"],
                    has_tile=bool(s["has_tile"]),
                    hotel=Hotel(s["hotel"]) if s["hotel"] is not None else None,
                )
                for s in data["board"]["slots"]
            )
        )
        last_placed = data.get("last_placed")
        return Game(
            players=players,
            board=board,
            turn=PlayerId(data["turn"]),
            turn_state=TurnState(data["turn_state"]),
            pool=tuple(tile_from_dict(t) for t in data.get("pool", [])),
            last_placed=tile_from_dict(last_placed) if last_placed else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Malformed game snapshot: {e}") from e

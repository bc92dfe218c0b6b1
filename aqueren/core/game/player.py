"""
Player state and share holdings.
"""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Dict, Tuple

from aqueren.core.game.hotels import Hotel
from aqueren.core.game.tiles import Tile


class PlayerId(IntEnum):
    """Seat of a player; turns cycle ONE -> TWO -> THREE -> FOUR -> ONE."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    def next(self) -> "PlayerId":
        return PlayerId(self.value % len(PlayerId) + 1)


@dataclass(frozen=True)
class PlayerShares:
    """Share counts held by a player, one field per hotel."""

    luxor: int = 0
    tower: int = 0
    american: int = 0
    festival: int = 0
    worldwide: int = 0
    continental: int = 0
    imperial: int = 0

    def get(self, hotel: Hotel) -> int:
        return getattr(self, hotel.key)

    def add(self, hotel: Hotel, count: int = 1) -> "PlayerShares":
        """Return new holdings with `count` more shares of `hotel`."""
        return replace(self, **{hotel.key: self.get(hotel) + count})

    def as_dict(self) -> Dict[str, int]:
        return {hotel.key: self.get(hotel) for hotel in Hotel}


@dataclass(frozen=True)
class Player:
    """
    A player at the table.

    Hand mutations go through `add_tile` / `remove_tile`, which return new
    Player values.
    """

    id: PlayerId
    money: int
    shares: PlayerShares = field(default_factory=PlayerShares)
    tiles: Tuple[Tile, ...] = ()

    def has_tile(self, tile: Tile) -> bool:
        return tile in self.tiles

    def add_tile(self, tile: Tile) -> "Player":
        if tile in self.tiles:
            raise ValueError(f"Player {self.id.value} already holds {tile!r}")
        return replace(self, tiles=self.tiles + (tile,))

    def remove_tile(self, tile: Tile) -> "Player":
        if tile not in self.tiles:
            raise ValueError(f"Player {self.id.value} does not hold {tile!r}")
        return replace(self, tiles=tuple(t for t in self.tiles if t != tile))

    def can_afford(self, amount: int) -> bool:
        return self.money >= amount

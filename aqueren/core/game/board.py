"""
The board: 108 slots, each holding at most one tile and one hotel.
"""

from collections import deque
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Set, Tuple

from aqueren.core.game.hotels import Hotel
from aqueren.core.game.tiles import COLS, ROWS, Tile, neighbors


@dataclass(frozen=True)
class Slot:
    """One cell of the board."""

    row: int
    col: int
    has_tile: bool = False
    hotel: Optional[Hotel] = None

    @property
    def tile(self) -> Tile:
        return Tile(self.row, self.col)


@dataclass(frozen=True)
class Board:
    """
    The 9x12 board.

    Slots are stored row-major; slot (row, col) lives at index row * COLS + col.
    """

    slots: Tuple[Slot, ...]

    def __post_init__(self) -> None:
        if len(self.slots) != ROWS * COLS:
            raise ValueError(f"Board needs {ROWS * COLS} slots, got {len(self.slots)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple(Slot(row, col) for row in range(ROWS) for col in range(COLS)))

    @classmethod
    def with_tiles(cls, tiles: Iterable[Tile]) -> "Board":
        """Board with the given tiles placed and no hotels."""
        occupied = {t.index for t in tiles}
        return cls(
            tuple(
                Slot(row, col, has_tile=(row * COLS + col) in occupied)
                for row in range(ROWS)
                for col in range(COLS)
            )
        )

    def slot_at(self, row: int, col: int) -> Slot:
        """Get the slot at (row, col)."""
        return self.slots[Tile(row, col).index]

    def slot_for(self, tile: Tile) -> Slot:
        return self.slots[tile.index]

    def placed_tiles(self) -> List[Tile]:
        """Tiles currently on the board, row-major."""
        return [s.tile for s in self.slots if s.has_tile]

    def place_tile(self, tile: Tile) -> "Board":
        """Return a new board with `tile` placed."""
        slots = list(self.slots)
        slots[tile.index] = replace(slots[tile.index], has_tile=True)
        return Board(tuple(slots))

    def assign_hotel(self, tiles: Iterable[Tile], hotel: Hotel) -> "Board":
        """Return a new board with `hotel` set on every slot in `tiles`."""
        slots = list(self.slots)
        for tile in tiles:
            slots[tile.index] = replace(slots[tile.index], hotel=hotel)
        return Board(tuple(slots))

    def active_hotels(self) -> Set[Hotel]:
        """Hotels that currently have at least one slot on the board."""
        return {s.hotel for s in self.slots if s.hotel is not None}

    def connected(self, start: Tile, include: Callable[[Slot], bool]) -> Set[Tile]:
        """
        Breadth-first search from `start` over orthogonal neighbours.

        Only slots accepted by `include` are visited; `start` is always part
        of the result.
        """
        seen = {start}
        queue = deque([start])
        while queue:
            tile = queue.popleft()
            for nxt in neighbors(tile):
                if nxt not in seen and include(self.slot_for(nxt)):
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def chain_size(self, hotel: Hotel) -> int:
        """
        Number of connected slots carrying `hotel`.

        If the hotel somehow covers several disconnected groups, the largest
        group is reported. 0 when the hotel is not on the board.
        """
        visited: Set[Tile] = set()
        largest = 0
        for slot in self.slots:
            if slot.hotel != hotel or slot.tile in visited:
                continue
            group = self.connected(slot.tile, lambda s: s.hotel == hotel)
            visited |= group
            largest = max(largest, len(group))
        return largest

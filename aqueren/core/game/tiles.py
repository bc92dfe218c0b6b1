"""
Tiles, grid geometry and the undrawn tile pool.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

ROWS = 9
COLS = 12
TILES = ROWS * COLS

ROW_LETTERS = "ABCDEFGHI"


@dataclass(frozen=True, order=True)
class Tile:
    """A playable token, identified by the board cell it occupies."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < ROWS and 0 <= self.col < COLS):
            raise ValueError(f"Tile ({self.row},{self.col}) is outside the {ROWS}x{COLS} board")

    @property
    def index(self) -> int:
        """Row-major position of this tile's slot on the board."""
        return self.row * COLS + self.col

    @classmethod
    def from_index(cls, index: int) -> "Tile":
        """Inverse of `index`."""
        if not 0 <= index < TILES:
            raise ValueError(f"Tile index {index} out of range")
        return cls(index // COLS, index % COLS)

    def label(self) -> str:
        """Human cell reference, e.g. Tile(1, 0) -> 'B1'."""
        return f"{ROW_LETTERS[self.row]}{self.col + 1}"

    def __repr__(self) -> str:
        return f"Tile({self.row},{self.col})"


def parse_cell_ref(text: str) -> Optional[Tile]:
    """Parse a cell reference such as 'B1' or 'i12'. Returns None if malformed."""
    text = text.strip()
    if len(text) < 2:
        return None
    row = ROW_LETTERS.find(text[0].upper())
    if row < 0:
        return None
    col_str = text[1:]
    if not (col_str.isascii() and col_str.isdigit()):
        return None
    col = int(col_str)
    if not 1 <= col <= COLS:
        return None
    return Tile(row, col - 1)


def all_tiles() -> List[Tile]:
    """Enumerate all 108 tiles in row-major order."""
    return [Tile.from_index(i) for i in range(TILES)]


def adjacent(a, b) -> bool:
    """
    True if two cells are exactly one orthogonal step apart.

    Accepts anything with `row` and `col` attributes (tiles and slots).
    """
    return abs(a.row - b.row) + abs(a.col - b.col) == 1


def neighbors(tile: Tile) -> List[Tile]:
    """Orthogonal neighbours of a tile that lie on the board."""
    result = []
    for dr, dc in ((-1, 0), (0, -1), (0, 1), (1, 0)):
        row, col = tile.row + dr, tile.col + dc
        if 0 <= row < ROWS and 0 <= col < COLS:
            result.append(Tile(row, col))
    return result


def choose_tiles(
    pool: Iterable[Tile], count: int, rng: random.Random
) -> Tuple[Tuple[Tile, ...], Tuple[Tile, ...]]:
    """
    Draw `count` tiles from `pool` without replacement.

    Each draw picks a uniform index into what is left of the supplied pool.

    Returns:
        (drawn, remaining)
    """
    remaining = list(pool)
    if count > len(remaining):
        raise ValueError(f"Cannot draw {count} tiles from a pool of {len(remaining)}")
    drawn = []
    for _ in range(count):
        drawn.append(remaining.pop(rng.randrange(len(remaining))))
    return tuple(drawn), tuple(remaining)

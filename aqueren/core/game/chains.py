"""
Adjacency analysis: what a freshly placed tile does to the chains around it.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set

from aqueren.core.game.board import Board
from aqueren.core.game.game import TurnState
from aqueren.core.game.hotels import Hotel
from aqueren.core.game.tiles import Tile, neighbors


@dataclass(frozen=True)
class PlacementOutcome:
    """
    Result of analysing a placement.

    Attributes:
        turn_state: State the turn moves to.
        hotel: The single chain the tile joins, if any.
        group: Unincorporated tiles connected to the placed tile (itself
            included). They join `hotel`, or form the new chain when the
            state is CreatingChain.
        neighbor_hotels: Distinct hotels found next to the tile.
    """

    turn_state: TurnState
    hotel: Optional[Hotel]
    group: FrozenSet[Tile]
    neighbor_hotels: FrozenSet[Hotel]


def occupied_neighbors(board: Board, tile: Tile) -> List[Tile]:
    return [n for n in neighbors(tile) if board.slot_for(n).has_tile]


def neighbor_hotels(board: Board, tile: Tile) -> Set[Hotel]:
    """Distinct hotels on the occupied orthogonal neighbours of `tile`."""
    return {
        board.slot_for(n).hotel
        for n in occupied_neighbors(board, tile)
        if board.slot_for(n).hotel is not None
    }


def unincorporated_group(board: Board, tile: Tile) -> Set[Tile]:
    """Placed tiles without a hotel that are connected to `tile`."""
    return board.connected(tile, lambda s: s.has_tile and s.hotel is None)


def analyze_placement(board: Board, tile: Tile) -> PlacementOutcome:
    """
    Decide the next turn state after `tile` has been put on `board`.

    - no occupied neighbour, or exactly one neighbouring hotel: BuyingOrDrawing
    - occupied neighbours but no hotel among them: CreatingChain
    - two or more distinct neighbouring hotels: Merging
    """
    hotels = neighbor_hotels(board, tile)
    occupied = occupied_neighbors(board, tile)

    if len(hotels) >= 2:
        return PlacementOutcome(TurnState.MERGING, None, frozenset({tile}), frozenset(hotels))

    group = frozenset(unincorporated_group(board, tile))
    if len(hotels) == 1:
        (hotel,) = hotels
        return PlacementOutcome(TurnState.BUYING_OR_DRAWING, hotel, group, frozenset(hotels))
    if occupied:
        return PlacementOutcome(TurnState.CREATING_CHAIN, None, group, frozenset())
    return PlacementOutcome(TurnState.BUYING_OR_DRAWING, None, group, frozenset())

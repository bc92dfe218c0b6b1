"""
Tests for the board: slot layout, placement, hotel assignment and chain sizes.
"""

from aqueren.core.game import Board, Hotel
from aqueren.core.game.tiles import COLS, ROWS, Tile


def test_empty_board_is_row_major():
    board = Board.empty()

    assert len(board.slots) == ROWS * COLS
    for index, slot in enumerate(board.slots):
        assert (slot.row, slot.col) == (index // COLS, index % COLS)
        assert not slot.has_tile
        assert slot.hotel is None


def test_slot_at_matches_coordinates():
    board = Board.empty()
    slot = board.slot_at(4, 7)
    assert (slot.row, slot.col) == (4, 7)


def test_with_tiles_marks_only_given_tiles():
    board = Board.with_tiles([Tile(0, 0), Tile(8, 11)])

    assert board.placed_tiles() == [Tile(0, 0), Tile(8, 11)]
    assert board.slot_at(0, 0).has_tile
    assert not board.slot_at(0, 1).has_tile


def test_place_tile_returns_new_board():
    board = Board.empty()
    placed = board.place_tile(Tile(2, 3))

    assert placed.slot_for(Tile(2, 3)).has_tile
    assert not board.slot_for(Tile(2, 3)).has_tile


def test_assign_hotel_and_active_hotels():
    board = Board.with_tiles([Tile(0, 0), Tile(0, 1), Tile(5, 5)])
    board = board.assign_hotel([Tile(0, 0), Tile(0, 1)], Hotel.LUXOR)

    assert board.slot_at(0, 1).hotel == Hotel.LUXOR
    assert board.slot_at(5, 5).hotel is None
    assert board.active_hotels() == {Hotel.LUXOR}


def test_chain_size_counts_connected_slots():
    tiles = [Tile(2, 2), Tile(2, 3), Tile(3, 3), Tile(4, 3)]
    board = Board.with_tiles(tiles).assign_hotel(tiles, Hotel.TOWER)

    assert board.chain_size(Hotel.TOWER) == 4
    assert board.chain_size(Hotel.LUXOR) == 0


def test_chain_size_ignores_diagonals_and_reports_largest_group():
    big = [Tile(0, 0), Tile(0, 1), Tile(0, 2)]
    diagonal = [Tile(1, 3)]
    tiles = big + diagonal
    board = Board.with_tiles(tiles).assign_hotel(tiles, Hotel.IMPERIAL)

    assert board.chain_size(Hotel.IMPERIAL) == 3


def test_connected_respects_predicate():
    board = Board.with_tiles([Tile(3, 3), Tile(3, 4), Tile(3, 6)])
    group = board.connected(Tile(3, 3), lambda s: s.has_tile)
    assert group == {Tile(3, 3), Tile(3, 4)}

"""
Tests for dealing a new game.
"""

import pytest

from aqueren.core.game import Game, GameConfig, PlayerId, TurnState, create_game
from aqueren.core.game.game import tile_partition_errors


def test_initial_deal(dealt_game):
    game = dealt_game

    assert len(game.players) == 4
    assert [p.id for p in game.players] == list(PlayerId)
    assert all(len(p.tiles) == 6 for p in game.players)
    assert all(p.money == 6000 for p in game.players)
    assert len(game.board.placed_tiles()) == 4
    assert len(game.pool) == 108 - 4 - 4 * 6
    assert game.board.active_hotels() == set()


def test_initial_turn(dealt_game):
    assert dealt_game.turn == PlayerId.ONE
    assert dealt_game.turn_state == TurnState.PLACING
    assert dealt_game.get_current_player().id == PlayerId.ONE
    assert dealt_game.last_placed is None


def test_deal_partitions_all_tiles(dealt_game):
    assert tile_partition_errors(dealt_game) == []


def test_same_seed_deals_same_game():
    assert create_game(GameConfig(seed=7)) == create_game(GameConfig(seed=7))


def test_different_seeds_deal_different_games():
    assert create_game(GameConfig(seed=7)) != create_game(GameConfig(seed=8))


def test_config_controls_hand_and_money():
    game = create_game(GameConfig(seed=1, starting_money=1000, hand_size=4))

    assert all(len(p.tiles) == 4 for p in game.players)
    assert all(p.money == 1000 for p in game.players)
    assert tile_partition_errors(game) == []


def test_partition_detects_duplicates(dealt_game):
    duplicated = dealt_game.players[0].tiles[0]
    broken = dealt_game.with_player(dealt_game.players[1].add_tile(duplicated))

    problems = tile_partition_errors(broken)
    assert any("appears 2 times" in p for p in problems)


def test_game_requires_players_in_seat_order(dealt_game):
    with pytest.raises(ValueError):
        Game(players=tuple(reversed(dealt_game.players)), board=dealt_game.board)

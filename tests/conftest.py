"""Shared test fixtures for Aqueren tests."""

from dataclasses import replace

import pytest

from aqueren.core.game import Board, Game, GameConfig, Player, PlayerId, TurnState, create_game
from aqueren.core.game.tiles import Tile, all_tiles

# Tiles on the board at the start of the standard test game
STANDARD_BOARD = [Tile(3, 2), Tile(5, 3), Tile(5, 4), Tile(5, 5)]


def standard_hands():
    """Player 1 holds A1-A6, player 2 B1-B6, player 3 C1-C6, player 4 E1-E6."""
    return [
        [Tile(0, c) for c in range(6)],
        [Tile(1, c) for c in range(6)],
        [Tile(2, c) for c in range(6)],
        [Tile(4, c) for c in range(6)],
    ]


def build_game(board_tiles, hands, hotels=None, turn=PlayerId.ONE, turn_state=TurnState.PLACING, money=6000):
    """
    Build a game with a fixed board and fixed hands.

    Every tile not on the board or in a hand goes to the pool, row-major.
    `hotels` maps hotels to the board tiles that carry them.
    """
    board = Board.with_tiles(board_tiles)
    for hotel, tiles in (hotels or {}).items():
        board = board.assign_hotel(tiles, hotel)
    used = set(board_tiles)
    players = []
    for player_id, hand in zip(PlayerId, hands):
        used.update(hand)
        players.append(Player(player_id, money, tiles=tuple(hand)))
    pool = tuple(t for t in all_tiles() if t not in used)
    return Game(players=tuple(players), board=board, turn=turn, turn_state=turn_state, pool=pool)


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def dealt_game(game_config):
    """Freshly dealt game with fixed seed."""
    return create_game(game_config)


@pytest.fixture
def make_game():
    """Factory for games with a hand-picked board and hands."""
    return build_game


@pytest.fixture
def standard_game():
    """Four tiles on the board and a row of six tiles in each hand."""
    return build_game(STANDARD_BOARD, standard_hands())


@pytest.fixture
def buying_game(standard_game):
    """Standard game after player 1 placed A3 on an empty neighbourhood."""
    board = standard_game.board.place_tile(Tile(0, 2))
    player = standard_game.players[0].remove_tile(Tile(0, 2))
    game = standard_game.with_player(player)
    return replace(game, board=board, turn_state=TurnState.BUYING_OR_DRAWING, last_placed=Tile(0, 2))

from dataclasses import replace

import pytest

from aqueren.core.exceptions import DecodeError
from aqueren.core.game import Hotel, TurnState
from aqueren.core.game.tiles import Tile
from aqueren.core.snapshot import deserialize_game, serialize_game, serialize_snapshot


def test_basic_snapshot_structure(dealt_game):
    snap = serialize_snapshot(dealt_game)

    assert set(snap.keys()) == {"players", "board", "turn", "turn_state", "tiles_remaining"}
    assert snap["turn"] == 1
    assert snap["turn_state"] == "Placing"
    assert snap["tiles_remaining"] == 80

    # The pool order stays private
    assert "pool" not in snap

    p1 = snap["players"][0]
    assert set(p1.keys()) == {"id", "money", "shares", "tiles"}
    assert p1["id"] == 1
    assert p1["money"] == 6000
    assert p1["shares"] == {
        "luxor": 0,
        "tower": 0,
        "american": 0,
        "festival": 0,
        "worldwide": 0,
        "continental": 0,
        "imperial": 0,
    }
    assert len(p1["tiles"]) == 6
    assert set(p1["tiles"][0].keys()) == {"row", "col"}


def test_snapshot_slots_row_major(dealt_game):
    slots = serialize_snapshot(dealt_game)["board"]["slots"]

    assert len(slots) == 108
    assert slots[0] == {"row": 0, "col": 0, "has_tile": slots[0]["has_tile"], "hotel": None}
    assert (slots[12]["row"], slots[12]["col"]) == (1, 0)
    assert sum(1 for s in slots if s["has_tile"]) == 4


def test_snapshot_uses_names(make_game):
    chain = [Tile(2, 2), Tile(2, 3)]
    game = make_game(chain, [[], [], [], []], hotels={Hotel.CONTINENTAL: chain})
    game = replace(game, turn_state=TurnState.BUYING_OR_DRAWING)

    snap = serialize_snapshot(game)

    assert snap["turn_state"] == "BuyingOrDrawing"
    assert snap["board"]["slots"][2 * 12 + 2]["hotel"] == "Continental"


def test_full_game_round_trip(buying_game):
    data = serialize_game(buying_game)

    assert data["last_placed"] == {"row": 0, "col": 2}
    assert len(data["pool"]) == len(buying_game.pool)
    assert deserialize_game(data) == buying_game


def test_public_snapshot_decodes_without_pool(dealt_game):
    game = deserialize_game(serialize_snapshot(dealt_game))

    assert game.players == dealt_game.players
    assert game.board == dealt_game.board
    assert game.pool == ()


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("players"),
        lambda d: d.update(turn=7),
        lambda d: d.update(turn_state="Sleeping"),
        lambda d: d["board"]["slots"].pop(),
        lambda d: d["board"]["slots"][0].update(hotel="Sackson"),
    ],
)
def test_malformed_snapshot_rejected(dealt_game, mutate):
    data = serialize_game(dealt_game)
    mutate(data)
    with pytest.raises(DecodeError):
        deserialize_game(data)

import pytest
from fastapi.testclient import TestClient

from aqueren.core.game import GameConfig, PlaceTile, PlayerId
from aqueren.core.game.tiles import Tile
from aqueren.server import create_app
from aqueren.services import GameService, InMemoryActionLog


@pytest.fixture
def client(standard_game):
    service = GameService(standard_game, config=GameConfig(seed=42))
    with TestClient(create_app(service)) as client:
        yield client


def _place(client: TestClient, row: int, col: int):
    return client.post("/action", json={"tile": {"row": row, "col": col}})


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_state_structure(client):
    resp = client.get("/state")
    assert resp.status_code == 200
    data = resp.json()

    assert data["turn"] == 1
    assert data["turn_state"] == "Placing"
    assert len(data["players"]) == 4
    assert data["players"][0]["tiles"][0] == {"row": 0, "col": 0}
    assert len(data["board"]["slots"]) == 108
    assert data["board"]["slots"][3 * 12 + 2] == {"row": 3, "col": 2, "has_tile": True, "hotel": None}


def test_place_tile(client):
    resp = _place(client, 0, 2)
    assert resp.status_code == 200, resp.text
    data = resp.json()

    assert data["turn_state"] == "BuyingOrDrawing"
    assert data["board"]["slots"][2]["has_tile"] is True
    assert {"row": 0, "col": 2} not in data["players"][0]["tiles"]
    assert client.get("/state").json() == data


def test_place_tile_not_held(client):
    before = client.get("/state").json()

    resp = _place(client, 5, 11)

    assert resp.status_code == 409
    assert "does not have tile" in resp.json()["error"]
    assert client.get("/state").json() == before
    assert client.get("/log").json()["actions"] == []


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"tile": {"row": 9, "col": 0}},
        {"tile": {"row": 0}},
        {"tile": "B1"},
    ],
)
def test_malformed_place_request(client, body):
    resp = client.post("/action", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_turn_through_actions_endpoint(client):
    assert _place(client, 0, 2).status_code == 200

    resp = client.post("/actions", json={"type": "buy_stocks", "hotels": ["Luxor", None, None]})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["players"][0]["money"] == 5800
    assert data["players"][0]["shares"]["luxor"] == 1
    assert data["turn_state"] == "Drawing"

    resp = client.post("/actions", json={"type": "draw_tile"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["turn"] == 2
    assert data["turn_state"] == "Placing"
    assert len(data["players"][0]["tiles"]) == 6

    log = client.get("/log").json()
    assert log["game_id"] == "default"
    assert [a["type"] for a in log["actions"]] == ["place_tile", "buy_stocks", "draw_tile"]
    assert log["actions"][2]["tile"] is not None


def test_out_of_order_action(client):
    resp = client.post("/actions", json={"type": "draw_tile"})
    assert resp.status_code == 409
    assert "turn state" in resp.json()["error"]


@pytest.mark.parametrize(
    "body",
    [
        {"type": "teleport"},
        {"type": "place_tile"},
        {"type": "found_chain"},
        {"type": "buy_stocks", "hotels": ["Sackson"]},
        {"type": "buy_stocks", "hotels": ["Luxor", "Luxor", "Luxor", "Luxor"]},
    ],
)
def test_malformed_action_request(client, body):
    resp = client.post("/actions", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_legal_actions_endpoint(client):
    data = client.get("/legal_actions").json()
    assert data == {"turn": 1, "turn_state": "Placing", "actions": ["place_tile"]}

    _place(client, 0, 2)
    data = client.get("/legal_actions").json()
    assert data["actions"] == ["buy_stocks", "draw_tile"]


def test_corrupt_log_is_a_server_fault(standard_game):
    log = InMemoryActionLog([PlaceTile(PlayerId.THREE, Tile(2, 0))])
    with TestClient(create_app(GameService(standard_game, log))) as client:
        resp = client.get("/state")
    assert resp.status_code == 500
    assert "consistency" in resp.json()["error"]


def test_serves_freshly_dealt_game():
    service = GameService.new_game(GameConfig(seed=42))
    with TestClient(create_app(service)) as client:
        data = client.get("/state").json()
    assert data["tiles_remaining"] == 80
    assert sum(1 for s in data["board"]["slots"] if s["has_tile"]) == 4

"""
Tests for GameRepository against in-memory SQLite.
"""

import pytest

from aqueren.core.snapshot import serialize_game
from aqueren.data import GameRepository, close_db, init_db, session_scope
from aqueren.data.config import DatabaseSettings, engine_kwargs_for


@pytest.fixture
def session():
    init_db("sqlite://")
    with session_scope() as session:
        yield session
    close_db()


def test_create_and_fetch_game(session, dealt_game):
    repo = GameRepository(session)
    record = repo.create_game("table", serialize_game(dealt_game), seed=42)

    fetched = repo.get_game_by_id("table")
    assert fetched is not None
    assert fetched.id == record.id
    assert fetched.seed == 42
    assert fetched.initial_state["turn_state"] == "Placing"
    assert repo.get_game_by_id("missing") is None


def test_actions_listed_in_sequence(session, dealt_game):
    repo = GameRepository(session)
    record = repo.create_game("table", serialize_game(dealt_game))

    repo.append_action(record.id, 0, {"type": "place_tile", "player": 1, "tile": {"row": 0, "col": 2}})
    repo.append_action(record.id, 1, {"type": "draw_tile", "player": 1, "tile": None})

    assert repo.count_actions(record.id) == 2
    assert [a["type"] for a in repo.list_actions(record.id)] == ["place_tile", "draw_tile"]


def test_delete_game(session, dealt_game):
    repo = GameRepository(session)
    record = repo.create_game("table", serialize_game(dealt_game))
    repo.append_action(record.id, 0, {"type": "draw_tile", "player": 1, "tile": None})

    assert repo.delete_game("table") is True
    assert repo.get_game_by_id("table") is None
    assert repo.delete_game("table") is False


def test_database_url_validation():
    assert DatabaseSettings(database_url="sqlite:///aqueren.db").enabled
    assert not DatabaseSettings(database_url="").enabled
    with pytest.raises(ValueError):
        DatabaseSettings(database_url="mysql://localhost/aqueren")


def test_engine_kwargs_for_sqlite_memory():
    kwargs = engine_kwargs_for("sqlite://")
    assert kwargs["connect_args"] == {"check_same_thread": False}
    assert "poolclass" in kwargs
    assert "pool_size" not in engine_kwargs_for("sqlite:///aqueren.db")

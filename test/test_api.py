"""
HTTP front end: game lifecycle, moves and validation through the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from gamma.api.main import app, games
from gamma.config import MAX_PLAYERS


@pytest.fixture
def client():
    games.clear()
    return TestClient(app)


def create(client, **params):
    resp = client.post("/games", json=params)
    assert resp.status_code == 200
    return resp.json()["game_id"]


def test_root(client):
    assert client.get("/").json()["message"] == "Gamma API"


def test_create_game_with_defaults(client):
    resp = client.post("/games", json={})
    assert resp.status_code == 200
    game = resp.json()["game"]
    assert game["width"] == 10
    assert game["height"] == 10
    assert game["number_of_players"] == 2
    assert game["free_fields_total"] == 100
    assert len(game["board"]) == 10


@pytest.mark.parametrize("params", [
    {"width": 0},
    {"players": -1},
    {"max_areas": 0},
    {"width": "wide"},
])
def test_create_game_rejects_bad_parameters(client, params):
    assert client.post("/games", json=params).status_code == 422


def test_create_game_rejects_huge_board(client):
    resp = client.post("/games", json={"width": 4294967295, "height": 4294967295})
    assert resp.status_code == 400
    assert "too large" in resp.json()["detail"]


def test_create_game_caps_players(client):
    assert client.post("/games", json={"width": 1, "height": 1, "players": MAX_PLAYERS}).status_code == 200
    resp = client.post("/games", json={"width": 1, "height": 1, "players": MAX_PLAYERS + 1})
    assert resp.status_code == 422


def test_move_and_board(client):
    game_id = create(client, width=3, height=2, players=2, max_areas=1)

    resp = client.post(f"/games/{game_id}/move", json={"player": 1, "x": 0, "y": 0})
    body = resp.json()
    assert body["success"]
    assert body["events"][0]["type"] == "field_claimed"
    # rows[0] is the top row
    assert body["game"]["board"] == [[0, 0, 0], [1, 0, 0]]

    resp = client.post(f"/games/{game_id}/move", json={"player": 1, "x": 2, "y": 1})
    body = resp.json()
    assert not body["success"]
    assert body["events"][0]["type"] == "move_rejected"

    board = client.get(f"/games/{game_id}/board")
    assert board.status_code == 200
    assert board.text == "...\n1..\n"


def test_golden_move(client):
    game_id = create(client, width=2, height=1, players=2, max_areas=1)
    client.post(f"/games/{game_id}/move", json={"player": 1, "x": 0, "y": 0})

    resp = client.post(f"/games/{game_id}/golden-move", json={"player": 2, "x": 0, "y": 0})
    body = resp.json()
    assert body["success"]
    assert [e["type"] for e in body["events"]] == ["golden_move_made", "field_claimed"]
    assert body["game"]["board"] == [[2, 0]]

    again = client.post(f"/games/{game_id}/golden-move", json={"player": 2, "x": 0, "y": 0})
    assert not again.json()["success"]


def test_player_stats(client):
    game_id = create(client, width=2, height=2, players=2, max_areas=1)
    client.post(f"/games/{game_id}/move", json={"player": 2, "x": 1, "y": 1})

    stats = client.get(f"/games/{game_id}/players/2").json()
    assert stats["busy_fields"] == 1
    assert stats["busy_areas"] == 1
    assert stats["free_fields"] == 2
    assert not stats["golden_move_possible"]

    assert client.get(f"/games/{game_id}/players/1").json()["golden_move_possible"]
    assert client.get(f"/games/{game_id}/players/3").status_code == 400
    assert client.get(f"/games/{game_id}/players/0").status_code == 400


def test_validate_does_not_change_the_game(client):
    game_id = create(client, width=3, height=1, players=2, max_areas=1)
    client.post(f"/games/{game_id}/move", json={"player": 1, "x": 0, "y": 0})
    before = client.get(f"/games/{game_id}").json()

    ok = client.post(f"/games/{game_id}/validate", json={"player": 2, "x": 0, "y": 0, "type": "golden_move"})
    assert ok.json() == {"valid": True, "error": None}

    bad = client.post(f"/games/{game_id}/validate", json={"player": 1, "x": 2, "y": 0})
    assert not bad.json()["valid"]
    assert "exceed" in bad.json()["error"]

    unknown = client.post(f"/games/{game_id}/validate", json={"player": 1, "x": 1, "y": 0, "type": "pass"})
    assert unknown.status_code == 400

    assert client.get(f"/games/{game_id}").json() == before


def test_delete_game(client):
    game_id = create(client, width=2, height=2)
    assert client.delete(f"/games/{game_id}").json() == {"deleted": True}
    assert client.delete(f"/games/{game_id}").json() == {"deleted": False}
    assert client.get(f"/games/{game_id}").status_code == 404


@pytest.mark.parametrize("method, path", [
    ("get", "/games/missing"),
    ("get", "/games/missing/board"),
    ("get", "/games/missing/players/1"),
])
def test_unknown_game_is_404(client, method, path):
    assert getattr(client, method)(path).status_code == 404


def test_move_on_unknown_game_is_404(client):
    resp = client.post("/games/missing/move", json={"player": 1, "x": 0, "y": 0})
    assert resp.status_code == 404

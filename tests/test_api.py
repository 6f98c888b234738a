"""API route tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app, game_hub, game_store
from game.commitment import compute_commitment
from game.rules import PASS_TARGET


client = TestClient(app)


@pytest.fixture(autouse=True)
def clean_store():
    game_store.clear()
    game_hub.calls.clear()
    yield
    game_store.clear()


def _create(session_id: int = 1, creator: str = "alice", **extra):
    return client.post("/games", json={"session_id": session_id, "creator": creator, "wager": 100, **extra})


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_game():
    r = _create()
    assert r.status_code == 200
    data = r.json()
    assert data["session_id"] == 1
    assert data["phase"] == "lobby"
    assert data["mode"] == "commit_reveal"
    assert len(data["seats"]) == 8
    assert data["seats"][0]["occupant"] == "alice"
    assert data["viewer_seat"] == 0
    r2 = client.get("/games")
    assert r2.json() == [1]


def test_create_game_conflict_and_validation():
    assert _create().status_code == 200
    r = _create()
    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "SessionExists"
    assert client.post("/games", json={"session_id": -1, "creator": "a"}).status_code == 422
    assert client.post("/games", json={"session_id": 2, "creator": ""}).status_code == 422
    assert _create(session_id=3, mode="secret").status_code == 422


def test_get_game_404():
    r = client.get("/games/999")
    assert r.status_code == 404
    assert r.json()["detail"] == {"error": "GameNotFound", "code": 1, "message": "GameNotFound"}


def test_join_and_begin():
    _create()
    r = client.post("/games/1/join", json={"player": "bob"})
    assert r.status_code == 200
    assert r.json()["seats"][1]["occupant"] == "bob"
    assert r.json()["human_count"] == 2

    r = client.post("/games/1/begin", json={"player": "bob"})
    assert r.status_code == 403
    assert r.json()["detail"]["error"] == "NotCreator"

    r = client.post("/games/1/begin", json={"player": "alice"})
    assert r.status_code == 200
    data = r.json()
    assert data["phase"] == "night_commit"
    assert data["day"] == 1
    shown = [s for s in data["seats"] if s["role"] is not None]
    assert [s["index"] for s in shown] == [0]
    assert [c.kind for c in game_hub.calls_for(1)] == ["start"]

    r = client.post("/games/1/join", json={"player": "carol"})
    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "WrongPhase"


def test_commit_reveal_resolve_flow():
    _create()
    client.post("/games/1/begin", json={"player": "alice"})
    commitment = "0x" + compute_commitment(PASS_TARGET, 42).hex()

    r = client.post("/games/1/commit", json={"player": "alice", "commitment": commitment})
    assert r.status_code == 200
    assert r.json()["phase"] == "night_reveal"
    assert r.json()["seats"][0]["committed"] is True

    r = client.post("/games/1/reveal", json={"player": "alice", "target": PASS_TARGET, "nonce": 43})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "InvalidReveal"

    r = client.post("/games/1/reveal", json={"player": "alice", "target": PASS_TARGET, "nonce": 42})
    assert r.status_code == 200
    assert r.json()["seats"][0]["submitted"] is True

    r = client.post("/games/1/reveal", json={"player": "alice", "target": PASS_TARGET, "nonce": 42})
    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "AlreadyActed"

    r = client.post("/games/1/resolve")
    assert r.status_code == 200
    assert r.json()["phase"] == "day"

    r = client.post("/games/1/resolve")
    assert r.status_code == 200
    assert r.json()["phase"] in ("night_commit", "night_reveal", "over")


def test_commit_validation():
    _create()
    client.post("/games/1/begin", json={"player": "alice"})
    r = client.post("/games/1/commit", json={"player": "alice", "commitment": "abc"})
    assert r.status_code == 422
    r = client.post("/games/1/commit", json={"player": "alice", "commitment": "zz" * 32})
    assert r.status_code == 422
    r = client.post("/games/1/commit", json={"player": "bob", "commitment": "00" * 32})
    assert r.status_code == 403
    assert r.json()["detail"]["error"] == "NotInGame"


def test_resolve_wrong_phase():
    _create()
    r = client.post("/games/1/resolve")
    assert r.status_code == 409
    client.post("/games/1/begin", json={"player": "alice"})
    r = client.post("/games/1/resolve")
    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "WrongPhase"


def test_transparent_mode_action_and_vote():
    _create(mode="transparent")
    r = client.post("/games/1/begin", json={"player": "alice"})
    assert r.json()["phase"] == "night"

    r = client.post("/games/1/vote", json={"player": "alice", "target": PASS_TARGET})
    assert r.status_code == 409
    r = client.post("/games/1/action", json={"player": "alice", "target": PASS_TARGET})
    assert r.status_code == 200
    r = client.post("/games/1/resolve")
    assert r.json()["phase"] == "day"

    # Alice may have died overnight; both failures are reported as bad input
    r = client.post("/games/1/action", json={"player": "alice", "target": 9})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] in ("InvalidTarget", "NotAlive")


def test_target_range_validation():
    _create(mode="transparent")
    client.post("/games/1/begin", json={"player": "alice"})
    r = client.post("/games/1/action", json={"player": "alice", "target": PASS_TARGET + 1})
    assert r.status_code == 422
    r = client.post("/games/1/reveal", json={"player": "alice", "target": 0, "nonce": 2**64})
    assert r.status_code == 422

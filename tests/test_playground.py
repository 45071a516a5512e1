"""Tests for the HTTP playground."""

import pytest
from fastapi.testclient import TestClient

from playground.web_server import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_classify(client):
    resp = client.post("/api/classify", json={"hand": "8C 8S KC 9H 9S"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["category"] == "TWO_PAIRS"
    assert body["rank"] == "NINE"
    assert body["description"] == "Two Pairs (Nine)"
    assert body["hand"] == "8C 8S KC 9H 9S"


def test_classify_invalid(client):
    resp = client.post("/api/classify", json={"hand": "8C 8S KC 9H 1S"})
    assert resp.status_code == 400
    assert "1S" in resp.json()["detail"]


def test_compare(client):
    resp = client.post("/api/compare", json={"hand_a": "2H 2D 4C 4D 4S", "hand_b": "3C 3D 3S 9S 9D"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["outcome"] == "GREATER"
    assert body["hand_a"]["category"] == "FULL_HOUSE"
    assert body["hand_b"]["rank"] == "THREE"


def test_compare_invalid(client):
    resp = client.post("/api/compare", json={"hand_a": "2H 2D 4C 4D 4S", "hand_b": "3C 3D"})
    assert resp.status_code == 400


def test_tally(client):
    lines = ["5H 5C 6S 7S KD 2C 3S 8S 8D TD", "5D 8C 9S JS AC 2C 5C 7D 8S QH"]
    resp = client.post("/api/tally", json={"lines": lines})
    assert resp.json() == {"wins_a": 1, "wins_b": 1, "draws": 0, "skipped": 0}


def test_tally_invalid(client):
    lines = ["5H 5C 6S 7S KD 2C 3S 8S 8D TD", "bad"]
    assert client.post("/api/tally", json={"lines": lines}).status_code == 400
    resp = client.post("/api/tally", json={"lines": lines, "skip_invalid": True})
    assert resp.json()["skipped"] == 1

"""HTTP 规则服务测试"""

import pytest
from fastapi.testclient import TestClient

from src.web.server import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_deal_is_reproducible(client):
    first = client.get("/api/deal", params={"seed": 5}).json()
    second = client.get("/api/deal", params={"seed": 5}).json()
    assert first == second
    assert len(first["hands"]) == 4
    assert all(len(h["cards"]) == 14 for h in first["hands"])
    assert sum(h["points"] for h in first["hands"]) == 100


def test_classify_straight_with_phoenix(client):
    response = client.post("/api/classify", json={"cards": ["H2", "H3", "H4", "H6", "Phoenix"]})
    assert response.status_code == 200
    data = response.json()
    assert data["hand_type"] == "STRAIGHT"
    assert data["relevant_value"] == 6
    assert data["is_bomb"] is False
    assert data["cards"][0]["special"] == "Phoenix"


def test_classify_invalid_combination(client):
    data = client.post("/api/classify", json={"cards": ["H2", "S9"]}).json()
    assert data["hand_type"] is None
    assert data["relevant_value"] is None


def test_classify_bad_card_text(client):
    response = client.post("/api/classify", json={"cards": ["H2", "Z9"]})
    assert response.status_code == 400


def test_classify_missing_field(client):
    response = client.post("/api/classify", json={})
    assert response.status_code == 422


def test_compare_bomb_over_straight(client):
    response = client.post("/api/compare", json={
        "hand": ["H2", "C2", "D2", "S2"],
        "previous": ["H9", "D10", "SJ", "CQ", "HK"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["can_be_played"] is True
    assert data["hand"]["hand_type"] == "QUADRUPLE_BOMB"
    assert data["previous"]["hand_type"] == "STRAIGHT"


def test_compare_lower_single(client):
    data = client.post("/api/compare", json={"hand": ["C4"], "previous": ["HK"]}).json()
    assert data["can_be_played"] is False


def test_classify_duplicate_cards(client):
    response = client.post("/api/classify", json={"cards": ["H2", "H2", "H2", "H2"]})
    assert response.status_code == 400


def test_compare_duplicate_phoenix(client):
    response = client.post("/api/compare", json={
        "hand": ["Phoenix"] * 5,
        "previous": ["H3"],
    })
    assert response.status_code == 400

"""Unit tests for the FastAPI app."""

import json

import pytest
from fastapi.testclient import TestClient

from creatorscore import __version__
from creatorscore.api import app

from tests.conftest import FIXTURES_DIR


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


class TestSystemEndpoints:
    """Test health and rules endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__

    def test_rules(self, client):
        body = client.get("/api/rules").json()
        assert body["max_total"] == 100
        assert body["connections"]["points_per_connection"] == 10


class TestScoreEndpoints:
    """Test scoring endpoints."""

    def test_score_snapshot(self, client):
        response = client.post("/api/score", json=load_fixture("complete_creator"))
        assert response.status_code == 200
        assert response.json() == {
            "profile_points": 20,
            "email_points": 10,
            "connection_points": 40,
            "audience_points": 20,
            "total": 90,
        }

    def test_score_empty_body_is_zero(self, client):
        response = client.post("/api/score", json={})
        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_score_rejects_unknown_platform(self, client):
        response = client.post("/api/score", json=load_fixture("invalid_creator"))
        assert response.status_code == 422

    def test_score_records(self, client):
        response = client.post("/api/score/records", json=load_fixture("store_records"))
        assert response.status_code == 200
        assert response.json()["total"] == 75

    @pytest.mark.parametrize("count", ["inf", "1e999", "nan", "Infinity"])
    def test_score_records_non_finite_count(self, client, count):
        bundle = {
            "profile": {"name": "Sam"},
            "connections": [{"platform": "youtube", "followerCount": count}],
        }
        response = client.post("/api/score/records", json=bundle)
        assert response.status_code == 200
        body = response.json()
        assert body["connection_points"] == 10
        assert body["audience_points"] == 0
        assert body["total"] == 15


class TestBatchEndpoint:
    """Test batch scoring."""

    def test_batch(self, client):
        payload = {"items": [
            {"creator_id": "ada", "snapshot": load_fixture("complete_creator")},
            {"creator_id": "nobody", "snapshot": load_fixture("empty_creator")},
        ]}
        response = client.post("/api/score/batch", json=payload)
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [r["creator_id"] for r in body["results"]] == ["ada", "nobody"]
        assert body["stats"]["mean_total"] == 45.0
        assert body["stats"]["max_total"] == 90

    def test_empty_batch_rejected(self, client):
        response = client.post("/api/score/batch", json={"items": []})
        assert response.status_code == 422

    def test_batch_over_limit_rejected(self, client, monkeypatch):
        monkeypatch.setenv("CREATORSCORE_API_MAX_BATCH_SIZE", "1")
        payload = {"items": [{"snapshot": {}}, {"snapshot": {}}]}
        response = client.post("/api/score/batch", json=payload)
        assert response.status_code == 422
        assert "limit is 1" in response.json()["detail"]

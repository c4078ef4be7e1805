"""
Tests for the HTTP API server.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from content_intel import __version__
from content_intel.api import create_api_server
from content_intel.container import create_container

REFERENCE_TIME = "2024-06-15T12:00:00Z"


@pytest.fixture
def client():
    return TestClient(create_api_server(create_container()))


@pytest.fixture
def collection(sample_items_payload):
    for entry in sample_items_payload:
        entry["tags"] = [tag["name"] for tag in entry["tags"]]
    return sample_items_payload


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}


class TestSearchEndpoints:
    def test_analyze(self, client):
        response = client.post("/api/analyze", json={"query": "what did I save yesterday"})
        assert response.status_code == 200
        data = response.json()
        assert data["intent"] == "question"
        assert data["timeframe"] == "yesterday"

    def test_search(self, client, collection):
        response = client.post(
            "/api/search",
            json={"query": "hooks", "items": collection, "now": REFERENCE_TIME},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_matches"] == 2
        assert [r["item"]["id"] for r in data["results"]] == ["react-1", "react-2"]
        assert data["results"][0]["relevance_score"] == 32.0

    def test_search_limit(self, client, collection):
        response = client.post("/api/search", json={"query": "react", "items": collection, "limit": 1})
        data = response.json()
        assert data["total_matches"] == 2
        assert len(data["results"]) == 1

    def test_negative_limit_rejected(self, client, collection):
        response = client.post("/api/search", json={"query": "react", "items": collection, "limit": -1})
        assert response.status_code == 422

    def test_invalid_item(self, client):
        response = client.post("/api/search", json={"query": "react", "items": [{"id": "1"}]})
        assert response.status_code == 422
        assert response.json()["category"] == "validation"

    def test_suggestions(self, client, collection):
        response = client.post("/api/suggestions", json={"items": collection, "now": REFERENCE_TIME})
        assert response.status_code == 200
        suggestions = response.json()["suggestions"]
        assert suggestions[0] == "What did I save recently?"
        assert len(suggestions) == 8


class TestIntelligenceEndpoints:
    def test_related(self, client, collection):
        response = client.post("/api/related", json={"item_id": "react-1", "items": collection, "limit": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["item_id"] == "react-1"
        assert len(data["links"]) <= 2

    def test_unknown_item(self, client, collection):
        response = client.post("/api/related", json={"item_id": "missing", "items": collection})
        assert response.status_code == 422
        assert "item_id" in response.json()["error"]

    def test_duplicates(self, client):
        items = [
            {"id": "a", "title": "Example", "url": "https://x.com/a", "created_at": "2024-06-01T00:00:00Z"},
            {"id": "b", "title": "Other", "url": "https://x.com/a", "created_at": "2024-06-10T00:00:00Z"},
        ]
        response = client.post("/api/duplicates", json={"item_id": "a", "items": items, "now": REFERENCE_TIME})
        assert response.status_code == 200
        [cluster] = response.json()["clusters"]
        assert cluster["reason"] == "Same URL"
        assert cluster["similarity_score"] == 0.9
        assert cluster["primary_item_id"] == "b"

    def test_summarize(self, client):
        item = {
            "id": "tip",
            "title": "Short tip.",
            "description": "Always use type hints in new code. Consider running mypy before every commit.",
            "created_at": REFERENCE_TIME,
        }
        response = client.post("/api/summarize", json={"item": item, "length": "bullets"})
        assert response.status_code == 200
        assert response.json()["summary"].startswith("• Always use type hints")

    def test_summarize_invalid_length(self, client):
        item = {"id": "1", "title": "Some title here", "created_at": REFERENCE_TIME}
        response = client.post("/api/summarize", json={"item": item, "length": "epic"})
        assert response.status_code == 422

    def test_analysis(self, client, collection):
        response = client.post("/api/analysis", json={"item_id": "note-1", "items": collection})
        assert response.status_code == 200
        data = response.json()
        assert data["item_id"] == "note-1"
        assert data["complexity"] in {"simple", "moderate", "complex"}

"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from brandlens.config import Settings
from brandlens.dependencies import get_settings
from brandlens.main import app
from tests.conftest import STRUCTURED_ANALYSIS, TECH_PROSE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["presets_registered"] == 18


def test_prompts():
    response = client.get("/api/prompts")
    assert response.status_code == 200
    assert set(response.json()) == {"quality", "fast"}


def test_list_presets():
    response = client.get("/api/presets")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 18
    assert "promptTemplate" in data[0]
    assert "renderStyles" in data[0]


def test_list_presets_by_category():
    response = client.get("/api/presets", params={"category": "luxury"})
    assert [p["id"] for p in response.json()] == ["luxury-crown", "luxury-diamond"]


def test_list_categories():
    response = client.get("/api/presets/categories")
    assert response.status_code == 200
    assert len(response.json()) == 9


def test_classify_structured():
    response = client.post("/api/classify", json={"analysis": STRUCTURED_ANALYSIS})
    assert response.status_code == 200
    data = response.json()
    assert data["industry"] == "luxury"
    assert data["colors"] == ["gold", "black"]
    assert data["presetMatch"] == "luxury-crown"
    assert data["brandName"] == "Aurum House"
    assert data["fontStyle"] == "serif-elegant"


def test_classify_empty_text():
    response = client.post("/api/classify", json={"analysis": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["industry"] == "tech"
    assert data["colors"] == ["blue"]


def test_classify_missing_field():
    response = client.post("/api/classify", json={})
    assert response.status_code == 422


def test_analyze():
    response = client.post("/api/analyze", json={"analysis": STRUCTURED_ANALYSIS, "brand_name": "Acme"})
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"]["industry"] == "luxury"
    assert data["answers"]["brandName"] == "Acme"
    assert data["config"]["brandName"] == "Acme"
    assert data["config"]["textColor"]["hex"] == "#D4AF37"
    assert len(data["presets"]) == 4
    assert data["presets"][0] == {"presetId": "luxury-crown", "score": 20}
    assert data["processing_time_ms"] >= 0


def test_analyze_limit():
    response = client.post("/api/analyze", json={"analysis": TECH_PROSE, "limit": 2})
    assert response.status_code == 200
    assert [p["presetId"] for p in response.json()["presets"]] == ["tech-circuit", "tech-ai"]


def test_analyze_invalid_limit():
    response = client.post("/api/analyze", json={"analysis": TECH_PROSE, "limit": 0})
    assert response.status_code == 422


def test_analyze_limit_from_settings():
    app.dependency_overrides[get_settings] = lambda: Settings(recommendation_limit=1)
    try:
        response = client.post("/api/analyze", json={"analysis": TECH_PROSE})
    finally:
        app.dependency_overrides.clear()
    assert len(response.json()["presets"]) == 1

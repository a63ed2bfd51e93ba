"""Integration tests for /api/regions, /health and /."""

from region_atlas.models import AIRegionResponse


def test_infer_temporal(test_client) -> None:
    response = test_client.post(
        "/api/regions/infer",
        json={"era": "Viking Age", "startYear": 800, "endYear": 850},
    )

    assert response.status_code == 200
    body = response.json()
    assert set(body["countries"]) == {"NO", "SE", "DK", "GB", "IE"}
    assert body["confidence"] == "high"
    assert body["source"] == "temporal"


def test_infer_accepts_snake_case_fields(test_client) -> None:
    response = test_client.post(
        "/api/regions/infer",
        json={"era": "FR", "start_year": 1900, "end_year": 1950},
    )

    assert response.status_code == 200
    assert response.json()["countries"] == ["FR"]
    assert response.json()["source"] == "hardcoded"


def test_infer_blank_era_is_rejected(test_client) -> None:
    response = test_client.post("/api/regions/infer", json={"era": "  ", "startYear": 1, "endYear": 2})

    assert response.status_code == 422


def test_infer_fallback(test_client) -> None:
    response = test_client.post(
        "/api/regions/infer",
        json={"era": "Zzyzx Period", "startYear": 1400, "endYear": 1500},
    )

    body = response.json()
    assert body["countries"] == []
    assert body["confidence"] == "low"
    assert body["source"] == "fallback"


def test_infer_ai_with_text_suggestions(test_client, fake_ai) -> None:
    fake_ai.response = AIRegionResponse(countries=["RU", "DE"], confidence="high", reasoning="Eastern Front")

    response = test_client.post(
        "/api/regions/infer",
        json={"era": "Eastern Front", "startYear": 1942, "endYear": 1943, "title": "Battle of Stalingrad"},
    )

    body = response.json()
    assert body["source"] == "ai"
    assert body["reasoning"] == "Eastern Front"
    assert body["suggestions"] == ["RU, DE"]


def test_period_lookup(test_client, fake_ai) -> None:
    fake_ai.response = AIRegionResponse(countries=["MX"])

    response = test_client.get("/api/regions/period", params={"period": "Aztec Empire"})

    assert response.status_code == 200
    assert response.json()["countries"] == ["MX"]
    assert fake_ai.period_calls == ["Aztec Empire"]


def test_period_lookup_blank(test_client) -> None:
    response = test_client.get("/api/regions/period", params={"period": "  "})

    assert response.status_code == 400


def test_known_eras(test_client) -> None:
    response = test_client.get("/api/regions/eras")

    assert response.status_code == 200
    assert "Roman Empire" in response.json()


def test_health_and_root(test_client) -> None:
    health = test_client.get("/health").json()
    root = test_client.get("/").json()

    assert health["status"] == "healthy"
    assert health["backboard_available"] is True
    assert root["name"] == "Era Atlas API"

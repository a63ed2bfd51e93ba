"""Integration tests for the AI region-lookup boundary."""


def test_lookup_returns_validated_payload(test_client, fake_backboard) -> None:
    response = test_client.get(
        "/api/region-lookup",
        params={"period": "Aztec Empire", "startYear": "1400", "endYear": "1500", "title": "Apocalypto"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "type": "empire", "countries": ["MX"], "timeframe": "1345-1521", "description": "Aztec",
    }
    assert "Apocalypto" in fake_backboard.prompts[0]


def test_lookup_missing_period(test_client) -> None:
    response = test_client.get("/api/region-lookup")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing period parameter"}


def test_lookup_not_configured(test_client, fake_backboard) -> None:
    fake_backboard.available = False

    response = test_client.get("/api/region-lookup", params={"period": "Aztec Empire"})

    assert response.status_code == 503
    assert "error" in response.json()


def test_lookup_upstream_failure(test_client, fake_backboard) -> None:
    fake_backboard.success = False

    response = test_client.get("/api/region-lookup", params={"period": "Aztec Empire"})

    assert response.status_code == 502
    assert response.json() == {"error": "Upstream API error"}


def test_lookup_filters_codes(test_client, fake_backboard) -> None:
    fake_backboard.response = '```json\n{"type":"era","countries":["FR","QQ","fr","DE"]}\n```'

    response = test_client.get("/api/region-lookup", params={"period": "Belle Epoque"})

    assert response.json()["countries"] == ["FR", "DE"]


def test_rate_limit_after_ten_requests(test_client) -> None:
    headers = {"X-Forwarded-For": "198.51.100.7, 10.0.0.1"}
    for _ in range(10):
        assert test_client.get("/api/region-lookup", params={"period": "Rome"}, headers=headers).status_code == 200

    response = test_client.get("/api/region-lookup", params={"period": "Rome"}, headers=headers)

    assert response.status_code == 429
    assert response.headers["Retry-After"] == "60"

    other = test_client.get("/api/region-lookup", params={"period": "Rome"}, headers={"X-Real-IP": "192.0.2.1"})
    assert other.status_code == 200

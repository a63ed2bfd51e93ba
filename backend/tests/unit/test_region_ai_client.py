import asyncio

import httpx

from region_atlas.models import Confidence, InferenceParams, LookupSource, RegionCacheEntry, RegionType
from region_atlas.services.region_ai import RegionAIClient, guess_fallback, parse_ai_payload

LOOKUP_URL = "http://lookup.test/api/region-lookup"


def _client(handler, cache, timeout: float = 1.0) -> RegionAIClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RegionAIClient(
        lookup_url=LOOKUP_URL,
        cache=cache,
        timeout_seconds=timeout,
        period_timeout_seconds=timeout,
        client=http,
    )


def _params(**overrides) -> InferenceParams:
    data = {"era": "Aztec Empire", "start_year": 1400, "end_year": 1500}
    data.update(overrides)
    return InferenceParams(**data)


# ── Payload validation ──

def test_parse_ai_payload_filters_and_coerces() -> None:
    parsed = parse_ai_payload({
        "countries": ["MX", "mx", "USA", 7, "MX", "GT"],
        "confidence": "certain",
        "description": "Mesoamerica",
        "suggestions": ["Tenochtitlan", 3],
    })

    assert parsed.countries == ["MX", "GT"]
    assert parsed.confidence == Confidence.LOW
    assert parsed.reasoning == "Mesoamerica"
    assert parsed.suggestions == ["Tenochtitlan"]


def test_parse_ai_payload_keeps_valid_confidence_and_reasoning() -> None:
    parsed = parse_ai_payload({"countries": ["PE"], "confidence": "high", "reasoning": "Andes"})

    assert parsed.confidence == Confidence.HIGH
    assert parsed.reasoning == "Andes"
    assert parsed.suggestions is None


def test_parse_ai_payload_drops_codes_off_the_iso_list() -> None:
    parsed = parse_ai_payload({"countries": ["ZZ", "XX", "FR"]})

    assert parsed.countries == ["FR"]


def test_parse_ai_payload_non_object() -> None:
    parsed = parse_ai_payload(["MX"])

    assert parsed.countries == []
    assert parsed.reasoning == ""


# ── fetch_ai_regions ──

def test_fetch_sends_period_years_and_truncated_title(cache) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"countries": ["MX"], "confidence": "medium"})

    client = _client(handler, cache)
    result = asyncio.run(client.fetch_ai_regions(_params(title="x" * 300)))

    assert result.countries == ["MX"]
    assert result.confidence == Confidence.MEDIUM
    assert seen["period"] == "Aztec Empire"
    assert seen["startYear"] == "1400"
    assert seen["endYear"] == "1500"
    assert len(seen["title"]) == 120


def test_fetch_omits_missing_title(cache) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"countries": []})

    asyncio.run(_client(handler, cache).fetch_ai_regions(_params()))

    assert "title" not in seen


def test_fetch_http_error_returns_none(cache) -> None:
    client = _client(lambda request: httpx.Response(502, json={"error": "Upstream API error"}), cache)

    assert asyncio.run(client.fetch_ai_regions(_params())) is None


def test_fetch_transport_error_returns_none(cache) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert asyncio.run(_client(handler, cache).fetch_ai_regions(_params())) is None


def test_fetch_invalid_json_returns_none(cache) -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"), cache)

    assert asyncio.run(client.fetch_ai_regions(_params())) is None


def test_fetch_timeout_returns_none(cache) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, json={"countries": ["MX"]})

    client = _client(handler, cache, timeout=0.05)

    assert asyncio.run(client.fetch_ai_regions(_params())) is None


def test_fetch_drops_unknown_codes(cache) -> None:
    client = _client(lambda request: httpx.Response(200, json={"countries": ["ZZ", "XX", "FR"]}), cache)

    result = asyncio.run(client.fetch_ai_regions(_params(era="Zzyzx Period")))

    assert result.countries == ["FR"]


# ── get_regions_for_period ──

def test_period_bare_code_and_static_skip_the_network(cache) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    client = _client(handler, cache)
    bare = asyncio.run(client.get_regions_for_period("fr"))
    static = asyncio.run(client.get_regions_for_period("viking age"))

    assert bare.countries == ["FR"]
    assert bare.source == LookupSource.HARDCODED
    assert static.type == RegionType.EMPIRE
    assert static.timeframe == "793-1066"
    assert static.description == "Viking Age (hardcoded mapping)"
    assert calls == []


def test_period_ai_answer_is_cached(cache) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(dict(request.url.params))
        return httpx.Response(200, json={
            "type": "empire", "countries": ["MX", "xx", "MX"], "timeframe": "1345-1521", "description": "Aztec",
        })

    client = _client(handler, cache)
    first = asyncio.run(client.get_regions_for_period("Aztec Empire"))
    second = asyncio.run(client.get_regions_for_period("Aztec Empire"))

    assert first.source == LookupSource.AI
    assert first.countries == ["MX"]
    assert first.type == RegionType.EMPIRE
    assert second.source == LookupSource.CACHE
    assert second.timeframe == "1345-1521"
    assert calls == [{"period": "Aztec Empire"}]


def test_period_caches_only_known_codes(cache) -> None:
    client = _client(lambda request: httpx.Response(200, json={"countries": ["ZZ", "XX", "FR"]}), cache)

    result = asyncio.run(client.get_regions_for_period("Zzyzx Period"))
    cached = asyncio.run(cache.read_region("Zzyzx Period"))

    assert result.countries == ["FR"]
    assert result.source == LookupSource.AI
    assert cached.countries == ["FR"]


def test_period_uses_existing_cache_entry(cache) -> None:
    asyncio.run(cache.write_region("Inca Empire", RegionCacheEntry(countries=["PE"], timestamp=0)))
    client = _client(lambda request: httpx.Response(500), cache)

    result = asyncio.run(client.get_regions_for_period("Inca Empire"))

    assert result.source == LookupSource.CACHE
    assert result.countries == ["PE"]


def test_period_empty_ai_answer_falls_back_without_caching(cache, store) -> None:
    client = _client(lambda request: httpx.Response(200, json={"type": "era", "countries": []}), cache)

    result = asyncio.run(client.get_regions_for_period("Kingdom of France"))

    assert result.source == LookupSource.FALLBACK
    assert result.countries == ["FR"]
    assert store._data == {}


def test_period_failure_falls_back(cache) -> None:
    client = _client(lambda request: httpx.Response(503), cache)

    result = asyncio.run(client.get_regions_for_period("Mystery Era"))

    assert result.source == LookupSource.FALLBACK
    assert result.countries == []
    assert result.type == RegionType.ERA


# ── Fallback guesser ──

def test_guess_fallback_prefers_names_on_word_boundaries() -> None:
    assert guess_fallback("Imperial Japan").countries == ["JP"]
    assert guess_fallback("Siege of Jerusalem").countries != ["US"]


def test_guess_fallback_extracts_bare_code() -> None:
    result = guess_fallback("Region DE circa 1200")

    assert result.countries == ["DE"]
    assert result.type == RegionType.COUNTRY


def test_guess_fallback_skips_unknown_codes() -> None:
    assert guess_fallback("Sector ZZ near DE").countries == ["DE"]
    assert guess_fallback("Sector ZZ").countries == []


def test_guess_fallback_gives_up_quietly() -> None:
    result = guess_fallback("something unknown")

    assert result.countries == []
    assert result.description == "something unknown"

import asyncio

from region_atlas.models import (
    Confidence,
    InferenceParams,
    RegionCacheEntry,
    RegionResult,
    RegionSource,
    RegionType,
)
from region_atlas.services.region_cache import (
    RegionCacheService,
    era_slug,
    inference_key,
    is_cacheable,
    region_key,
)


def _params(era: str = "Viking Age", start: int = 800, end: int = 850) -> InferenceParams:
    return InferenceParams(era=era, start_year=start, end_year=end)


def _result(source: RegionSource = RegionSource.AI) -> RegionResult:
    return RegionResult(
        countries=["NO", "SE"],
        confidence=Confidence.HIGH,
        reasoning="test",
        source=source,
    )


def test_keys() -> None:
    assert era_slug("Viking Age") == "viking_age"
    assert era_slug("Rome: 1st c. (AD)") == "rome_1st_c_ad_"
    assert inference_key(_params()) == "inference_viking_age_800_850"
    assert inference_key(_params(start=-27, end=14)) == "inference_viking_age_-27_14"
    assert region_key("Aztec Empire") == "regionCache_Aztec Empire"


def test_only_fallback_is_not_cacheable() -> None:
    assert not is_cacheable(_result(RegionSource.FALLBACK))
    for source in RegionSource:
        if source != RegionSource.FALLBACK:
            assert is_cacheable(_result(source))


def test_inference_roundtrip(cache, store) -> None:
    async def run():
        assert await cache.write_inference(_params(), _result()) is True
        return await cache.read_inference(_params())

    cached = asyncio.run(run())

    assert cached.countries == ["NO", "SE"]
    assert cached.source == RegionSource.AI
    assert "inference_viking_age_800_850" in store._data


def test_fallback_is_never_written(cache, store) -> None:
    written = asyncio.run(cache.write_inference(_params(), _result(RegionSource.FALLBACK)))

    assert written is False
    assert store._data == {}


def test_ai_entry_expires_after_ttl(cache, store, clock) -> None:
    asyncio.run(cache.write_inference(_params(), _result(RegionSource.AI)))

    clock.advance(days=29)
    assert asyncio.run(cache.read_inference(_params())) is not None

    clock.advance(days=2)
    assert asyncio.run(cache.read_inference(_params())) is None
    assert store._data == {}


def test_non_ai_entry_never_expires(cache, clock) -> None:
    asyncio.run(cache.write_inference(_params(), _result(RegionSource.TEMPORAL)))
    clock.advance(days=365)

    assert asyncio.run(cache.read_inference(_params())).source == RegionSource.TEMPORAL


def test_corrupt_entry_is_a_miss(cache, store) -> None:
    store._data["inference_viking_age_800_850"] = "{not json"

    assert asyncio.run(cache.read_inference(_params())) is None


def test_storage_failures_are_swallowed(broken_store, clock) -> None:
    cache = RegionCacheService(store=broken_store, clock=clock)

    assert asyncio.run(cache.read_inference(_params())) is None
    assert asyncio.run(cache.write_inference(_params(), _result())) is False
    assert asyncio.run(cache.read_region("Aztec Empire")) is None


def test_clear_single_inference_entry(cache) -> None:
    async def run():
        await cache.write_inference(_params(), _result())
        await cache.write_inference(_params(start=851, end=900), _result())
        removed = await cache.clear_inference_entry(_params())
        return removed, await cache.read_inference(_params()), await cache.read_inference(_params(start=851, end=900))

    removed, first, second = asyncio.run(run())

    assert removed is True
    assert first is None
    assert second is not None


def test_region_entries_stats_and_clear_all(cache, clock) -> None:
    entry = RegionCacheEntry(type=RegionType.EMPIRE, countries=["MX"], timeframe="1345-1521", timestamp=0)

    async def run():
        await cache.write_region("Aztec Empire", entry)
        clock.advance(hours=1)
        await cache.write_region("Inca Empire", entry.model_copy(update={"countries": ["PE"]}))
        await cache.write_inference(_params(), _result())
        stats = await cache.region_cache_stats()
        listing = await cache.list_regions()
        cleared = await cache.clear_all()
        return stats, listing, cleared, await cache.region_cache_stats()

    stats, listing, cleared, after = asyncio.run(run())

    assert stats.entries == 2
    assert stats.size_kb > 0
    assert stats.newest - stats.oldest == 3_600_000
    assert listing["Aztec Empire"].countries == ["MX"]
    assert listing["Inca Empire"].timestamp == stats.newest
    assert cleared == {"inference": 1, "regions": 2}
    assert after.entries == 0
    assert after.oldest is None


def test_region_entry_expires(cache, clock) -> None:
    entry = RegionCacheEntry(countries=["MX"], timestamp=0)
    asyncio.run(cache.write_region("Aztec Empire", entry))

    clock.advance(days=31)

    assert asyncio.run(cache.read_region("Aztec Empire")) is None

"""Pytest configuration for Era Atlas tests."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add backend directory to sys.path so region_atlas imports work from any cwd
BACKEND_DIR = Path(__file__).parent.parent.resolve()
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from region_atlas.models import AIRegionResponse, ChatResponse, LookupSource, PeriodRegionResult, RegionType  # noqa: E402
from region_atlas.services.custom_mappings import CustomMappingService  # noqa: E402
from region_atlas.services.kv_store import MemoryKeyValueStore  # noqa: E402
from region_atlas.services.rate_limiter import SlidingWindowRateLimiter  # noqa: E402
from region_atlas.services.region_cache import RegionCacheService  # noqa: E402
from region_atlas.services.region_inference import RegionInferenceService  # noqa: E402
from region_atlas.services.region_lookup import RegionLookupService  # noqa: E402


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeAIClient:
    """Stands in for RegionAIClient; records every year-aware call."""

    def __init__(self, response: AIRegionResponse | None = None):
        self.response = response
        self.calls = []
        self.period_calls = []

    async def fetch_ai_regions(self, params):
        self.calls.append(params)
        return self.response

    async def get_regions_for_period(self, period):
        self.period_calls.append(period)
        return PeriodRegionResult(
            type=RegionType.ERA,
            countries=list(self.response.countries) if self.response else [],
            source=LookupSource.AI if self.response else LookupSource.FALLBACK,
        )

    async def close(self):
        pass


class FakeBackboard:
    """Stands in for BackboardService with a canned chat answer."""

    def __init__(self, response: str | None = None, available: bool = True, success: bool = True):
        self.response = response
        self.available = available
        self.success = success
        self.prompts = []

    @property
    def is_available(self) -> bool:
        return self.available

    async def ask(self, prompt: str) -> ChatResponse:
        self.prompts.append(prompt)
        if not self.success:
            return ChatResponse(success=False, error="upstream exploded")
        return ChatResponse(success=True, response=self.response)


class BrokenStore(MemoryKeyValueStore):
    """Store whose every operation fails like an unavailable disk."""

    async def get(self, key):
        raise OSError("disk unavailable")

    async def set(self, key, value):
        raise OSError("disk unavailable")

    async def delete(self, key):
        raise OSError("disk unavailable")

    async def keys(self, prefix=""):
        raise OSError("disk unavailable")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def cache(store, clock):
    return RegionCacheService(store=store, clock=clock, ai_ttl=timedelta(days=30))


@pytest.fixture
def custom_service(store, cache):
    return CustomMappingService(store=store, cache=cache)


@pytest.fixture
def fake_ai():
    return FakeAIClient()


@pytest.fixture
def inference_service(cache, custom_service, fake_ai):
    return RegionInferenceService(cache=cache, custom=custom_service, ai_client=fake_ai)


@pytest.fixture
def fake_backboard():
    return FakeBackboard(
        response='{"type":"empire","countries":["MX"],"timeframe":"1345-1521","description":"Aztec"}'
    )


@pytest.fixture
def test_app(cache, custom_service, fake_ai, inference_service, fake_backboard):
    """App with in-memory services on app.state; lifespan is not run."""
    from region_atlas.app import create_app

    app = create_app()
    app.state.backboard = fake_backboard
    app.state.region_cache = cache
    app.state.custom_mapping_service = custom_service
    app.state.region_ai_client = fake_ai
    app.state.inference_service = inference_service
    app.state.lookup_service = RegionLookupService(backboard=fake_backboard)
    app.state.rate_limiter = SlidingWindowRateLimiter(limit=10, window_seconds=60)
    return app


@pytest.fixture
def test_client(test_app):
    """Provide a FastAPI TestClient for integration tests."""
    from fastapi.testclient import TestClient

    return TestClient(test_app)

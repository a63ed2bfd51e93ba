"""
Two-namespace region cache.

    inference_<slug>_<start>_<end>  orchestrator results per (era, years)
    regionCache_<period>            single-period AI lookups

AI-sourced entries expire after the configured TTL; everything else is kept
until an admin clears it. Read and write failures on the resolver path are
logged and treated as a miss / no-op.
"""

import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import aiosqlite

from region_atlas.config import settings
from region_atlas.logging import get_logger
from region_atlas.models import (
    CachedInference,
    CacheStats,
    InferenceParams,
    RegionCacheEntry,
    RegionResult,
    RegionSource,
)
from region_atlas.services.kv_store import KeyValueStore

logger = get_logger('services.region_cache')

INFERENCE_PREFIX = "inference_"
REGION_PREFIX = "regionCache_"

STORAGE_ERRORS = (aiosqlite.Error, OSError, ValueError)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def era_slug(era: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", era.lower())


def inference_key(params: InferenceParams) -> str:
    return f"{INFERENCE_PREFIX}{era_slug(params.era)}_{params.start_year}_{params.end_year}"


def region_key(period: str) -> str:
    return f"{REGION_PREFIX}{period}"


def is_cacheable(result: RegionResult) -> bool:
    """Fallback answers are never stored, so the next call retries every tier."""
    return result.source != RegionSource.FALLBACK


class RegionCacheService:
    """Cache reads, writes and admin operations over an injected store."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = _utcnow,
        ai_ttl: timedelta | None = None,
    ):
        self.store = store
        self.clock = clock
        self.ai_ttl = ai_ttl or timedelta(days=settings.AI_CACHE_TTL_DAYS)

    def _expired(self, stored_at: datetime) -> bool:
        return self.clock() - stored_at > self.ai_ttl

    # ── Inference namespace ──

    async def read_inference(self, params: InferenceParams) -> RegionResult | None:
        key = inference_key(params)
        try:
            raw = await self.store.get(key)
            if raw is None:
                return None
            entry = CachedInference.model_validate_json(raw)
        except STORAGE_ERRORS as e:
            logger.warning(f"Inference cache read failed for {key}: {e}")
            return None

        if entry.source == RegionSource.AI and self._expired(entry.cached_at):
            logger.info(f"Inference cache entry expired: {key}")
            await self._safe_delete(key)
            return None

        return RegionResult(**entry.model_dump(exclude={"cached_at"}))

    async def write_inference(self, params: InferenceParams, result: RegionResult) -> bool:
        if not is_cacheable(result):
            return False
        key = inference_key(params)
        entry = CachedInference(**result.model_dump(), cached_at=self.clock())
        try:
            await self.store.set(key, entry.model_dump_json())
            return True
        except STORAGE_ERRORS as e:
            logger.warning(f"Inference cache write failed for {key}: {e}")
            return False

    async def clear_inference_entry(self, params: InferenceParams) -> bool:
        return await self.store.delete(inference_key(params))

    async def clear_inference_cache(self) -> int:
        removed = await self.store.delete_prefix(INFERENCE_PREFIX)
        logger.info(f"Cleared {removed} inference cache entries")
        return removed

    # ── Per-period namespace ──

    async def read_region(self, period: str) -> RegionCacheEntry | None:
        key = region_key(period)
        try:
            raw = await self.store.get(key)
            if raw is None:
                return None
            entry = RegionCacheEntry.model_validate_json(raw)
        except STORAGE_ERRORS as e:
            logger.warning(f"Region cache read failed for {key}: {e}")
            return None

        stored_at = datetime.fromtimestamp(entry.timestamp / 1000, tz=timezone.utc)
        if self._expired(stored_at):
            logger.info(f"Region cache entry expired: {key}")
            await self._safe_delete(key)
            return None
        return entry

    async def write_region(self, period: str, entry: RegionCacheEntry) -> bool:
        key = region_key(period)
        stamped = entry.model_copy(update={"timestamp": _to_ms(self.clock())})
        try:
            await self.store.set(key, stamped.model_dump_json())
            return True
        except STORAGE_ERRORS as e:
            logger.warning(f"Region cache write failed for {key}: {e}")
            return False

    async def list_regions(self) -> dict[str, RegionCacheEntry]:
        entries: dict[str, RegionCacheEntry] = {}
        for key, raw in await self.store.items(REGION_PREFIX):
            try:
                entries[key[len(REGION_PREFIX):]] = RegionCacheEntry.model_validate_json(raw)
            except ValueError:
                logger.debug(f"Skipping corrupt region cache entry {key}")
        return entries

    async def clear_region_entry(self, period: str) -> bool:
        deleted = await self.store.delete(region_key(period))
        if deleted:
            logger.info(f'Cleared region cache entry for "{period}"')
        return deleted

    async def clear_region_cache(self) -> int:
        removed = await self.store.delete_prefix(REGION_PREFIX)
        logger.info(f"Cleared {removed} region cache entries")
        return removed

    async def region_cache_stats(self) -> CacheStats:
        total_chars = 0
        timestamps: list[int] = []
        for _, raw in await self.store.items(REGION_PREFIX):
            total_chars += len(raw)
            try:
                timestamps.append(RegionCacheEntry.model_validate_json(raw).timestamp)
            except ValueError:
                continue

        return CacheStats(
            entries=len(timestamps),
            size_kb=round(total_chars / 1024, 1),
            oldest=min(timestamps) if timestamps else None,
            newest=max(timestamps) if timestamps else None,
        )

    # ── Both ──

    async def clear_all(self) -> dict[str, int]:
        return {
            "inference": await self.clear_inference_cache(),
            "regions": await self.clear_region_cache(),
        }

    async def _safe_delete(self, key: str) -> None:
        try:
            await self.store.delete(key)
        except STORAGE_ERRORS as e:
            logger.warning(f"Cache eviction failed for {key}: {e}")

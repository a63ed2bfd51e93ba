"""
User-authored period overrides.

Mappings are keyed by the lower-cased period name so lookups are
case-insensitive; the display spelling is kept inside the stored value.
"""

import csv
import io
import json

from region_atlas.logging import get_logger
from region_atlas.models import (
    CustomMapping,
    CustomMappingImportResult,
    CustomMappingUpsert,
    normalize_codes,
)
from region_atlas.services.kv_store import KeyValueStore
from region_atlas.services.region_cache import STORAGE_ERRORS, RegionCacheService

logger = get_logger('services.custom_mappings')

CUSTOM_PREFIX = "customRegion_"

CSV_HEADER = ["period", "countries", "timeframe", "description"]


def custom_key(period: str) -> str:
    return f"{CUSTOM_PREFIX}{period.strip().lower()}"


def _parse_import_entry(period: str, raw: dict) -> CustomMapping:
    return CustomMapping(
        period=period,
        countries=normalize_codes(raw.get("countries")),
        timeframe=raw["timeframe"] if isinstance(raw.get("timeframe"), str) else "",
        description=raw["description"] if isinstance(raw.get("description"), str) else "",
    )


def parse_import(text: str) -> list[CustomMapping]:
    """
    Parse an import payload.

    Accepts either a JSON array of ``{period, countries, timeframe, description}``
    objects or a JSON object keyed by period. Countries may be a list or a
    comma/space separated string.

    :raises ValueError: On invalid JSON, a wrong top-level shape, or no usable entries
    """
    try:
        parsed = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    entries: list[CustomMapping] = []
    if isinstance(parsed, list):
        for item in parsed:
            if not isinstance(item, dict) or not isinstance(item.get("period"), str):
                continue
            if not item["period"].strip():
                continue
            entries.append(_parse_import_entry(item["period"], item))
    elif isinstance(parsed, dict):
        for period, value in parsed.items():
            if not period.strip() or not isinstance(value, dict):
                continue
            entries.append(_parse_import_entry(period, value))
    else:
        raise ValueError("Expected a JSON array or object.")

    if not entries:
        raise ValueError("No valid entries found in the JSON.")
    return entries


class CustomMappingService:
    """CRUD, import/export and cache promotion for custom mappings."""

    def __init__(self, store: KeyValueStore, cache: RegionCacheService):
        self.store = store
        self.cache = cache

    async def set_mapping(self, period: str, data: CustomMappingUpsert) -> CustomMapping:
        period = period.strip()
        if not period:
            raise ValueError("Period must not be empty")
        mapping = CustomMapping(period=period, **data.model_dump())
        await self.store.set(custom_key(period), mapping.model_dump_json())
        logger.info(f'Saved custom mapping "{period}" -> {",".join(mapping.countries) or "(none)"}')
        return mapping

    async def get_mapping(self, period: str) -> CustomMapping | None:
        raw = await self.store.get(custom_key(period))
        return CustomMapping.model_validate_json(raw) if raw else None

    async def delete_mapping(self, period: str) -> bool:
        deleted = await self.store.delete(custom_key(period))
        if deleted:
            logger.info(f'Deleted custom mapping "{period}"')
        return deleted

    async def list_mappings(self) -> list[CustomMapping]:
        mappings: list[CustomMapping] = []
        for key, raw in await self.store.items(CUSTOM_PREFIX):
            try:
                mappings.append(CustomMapping.model_validate_json(raw))
            except ValueError:
                logger.warning(f"Skipping corrupt custom mapping {key}")
        return sorted(mappings, key=lambda m: m.period.lower())

    async def clear_mappings(self) -> int:
        removed = await self.store.delete_prefix(CUSTOM_PREFIX)
        logger.info(f"Cleared {removed} custom mappings")
        return removed

    async def find_countries(self, period: str) -> CustomMapping | None:
        """Resolver-side lookup: a mapping with countries, or None. Never raises on storage errors."""
        try:
            mapping = await self.get_mapping(period)
        except STORAGE_ERRORS as e:
            logger.warning(f'Custom mapping read failed for "{period}": {e}')
            return None
        if mapping and mapping.countries:
            return mapping
        return None

    # ── Import / export ──

    async def import_mappings(self, text: str) -> CustomMappingImportResult:
        entries = parse_import(text)
        for entry in entries:
            await self.set_mapping(entry.period, CustomMappingUpsert(**entry.model_dump(exclude={"period"})))
        return CustomMappingImportResult(imported=len(entries), periods=[e.period for e in entries])

    async def export_json(self) -> list[dict]:
        return [m.model_dump() for m in await self.list_mappings()]

    async def export_csv(self) -> str:
        buffer = io.StringIO()
        buffer.write(",".join(CSV_HEADER) + "\n")
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for m in await self.list_mappings():
            writer.writerow([m.period, " ".join(m.countries), m.timeframe, m.description])
        return buffer.getvalue()

    async def promote_cached(self, period: str) -> CustomMapping | None:
        """Copy a cached AI lookup into the custom store and drop the cache entry."""
        cached = await self.cache.read_region(period)
        if cached is None:
            return None
        mapping = await self.set_mapping(
            period,
            CustomMappingUpsert(
                countries=cached.countries,
                timeframe=cached.timeframe,
                description=cached.description,
            ),
        )
        await self.cache.clear_region_entry(period)
        return mapping

"""
Client for the region-lookup AI boundary.

Two entry points:
    fetch_ai_regions         year-aware lookup used by the inference pipeline
    get_regions_for_period   single-period lookup with static table, cache
                             and a name-matching fallback

Every failure (timeout, transport, HTTP status, malformed JSON) degrades to
"no data"; nothing here raises to the caller.
"""

import asyncio
import re
from typing import Any

import httpx

from region_atlas.data.region_mappings import NAME_TO_CODE, REGION_MAPPINGS, VALID_COUNTRY_CODES
from region_atlas.logging import get_logger
from region_atlas.models import (
    AIRegionResponse,
    Confidence,
    InferenceParams,
    LookupSource,
    PeriodRegionResult,
    RegionCacheEntry,
    RegionType,
    is_country_code,
    unique_codes,
)
from region_atlas.services.region_cache import RegionCacheService
from region_atlas.services.static_mappings import bare_country_code, find_static_key, static_timeframe

logger = get_logger('services.region_ai')

TITLE_MAX_CHARS = 120

_NAME_PATTERNS = [
    (re.compile(rf"\b{re.escape(name)}\b"), name, code) for name, code in NAME_TO_CODE.items()
]
_BARE_CODE = re.compile(r"\b([A-Z]{2})\b")


def allowed_codes(raw: Any) -> list[str]:
    """Codes from an AI answer that are ISO-shaped and on the allowlist, deduplicated."""
    if not isinstance(raw, list):
        return []
    return unique_codes(c for c in raw if is_country_code(c) and c in VALID_COUNTRY_CODES)


def parse_ai_payload(data: Any) -> AIRegionResponse:
    """
    Validate an AI answer.

    - countries: only ``^[A-Z]{2}$`` codes on the ISO allowlist survive, duplicates removed
    - confidence: high/medium kept, anything else becomes low
    - reasoning: falls back to the boundary's description, then ""
    - suggestions: strings only, None when absent
    """
    if not isinstance(data, dict):
        return AIRegionResponse()

    countries = allowed_codes(data.get("countries"))

    confidence = data.get("confidence")
    if confidence not in (Confidence.HIGH.value, Confidence.MEDIUM.value):
        confidence = Confidence.LOW.value

    reasoning = data.get("reasoning")
    if not isinstance(reasoning, str):
        description = data.get("description")
        reasoning = description if isinstance(description, str) else ""

    raw_suggestions = data.get("suggestions")
    suggestions = (
        [s for s in raw_suggestions if isinstance(s, str)]
        if isinstance(raw_suggestions, list) else None
    )

    return AIRegionResponse(
        countries=countries,
        confidence=Confidence(confidence),
        reasoning=reasoning,
        suggestions=suggestions,
    )


def guess_fallback(period: str) -> PeriodRegionResult:
    """Best-effort answer when the AI is unavailable. Never raises."""
    lower = period.lower()

    for pattern, name, code in _NAME_PATTERNS:
        if pattern.search(lower):
            logger.info(f'Fallback matched "{name}" -> {code} for "{period}"')
            return PeriodRegionResult(
                type=RegionType.COUNTRY,
                countries=[code],
                description=f'Matched "{name}" in period name',
                source=LookupSource.FALLBACK,
            )

    codes = allowed_codes(_BARE_CODE.findall(period))
    if codes:
        return PeriodRegionResult(
            type=RegionType.COUNTRY,
            countries=codes[:1],
            description=f'Extracted code from "{period}"',
            source=LookupSource.FALLBACK,
        )

    logger.warning(f'Fallback could not determine region for "{period}"')
    return PeriodRegionResult(
        type=RegionType.ERA,
        countries=[],
        description=period,
        source=LookupSource.FALLBACK,
    )


class RegionAIClient:
    """HTTP client for the region-lookup endpoint with a hard timeout."""

    def __init__(
        self,
        lookup_url: str,
        cache: RegionCacheService,
        timeout_seconds: float = 12.0,
        period_timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.lookup_url = lookup_url
        self.cache = cache
        self.timeout_seconds = timeout_seconds
        self.period_timeout_seconds = period_timeout_seconds
        self.client = client or httpx.AsyncClient(follow_redirects=True)

    async def close(self) -> None:
        await self.client.aclose()

    async def _get_json(self, query: dict[str, str], timeout: float, label: str) -> Any | None:
        try:
            response = await asyncio.wait_for(
                self.client.get(self.lookup_url, params=query, timeout=timeout),
                timeout=timeout,
            )
            response.raise_for_status()
            return response.json()
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f'AI lookup timeout after {timeout:.0f}s for "{label}"')
        except httpx.HTTPStatusError as e:
            logger.warning(f'AI lookup returned {e.response.status_code} for "{label}"')
        except httpx.HTTPError as e:
            logger.warning(f'AI lookup error for "{label}": {e}')
        except ValueError as e:
            logger.warning(f'AI lookup returned invalid JSON for "{label}": {e}')
        return None

    async def fetch_ai_regions(self, params: InferenceParams) -> AIRegionResponse | None:
        """
        Ask the AI boundary for the countries of an era in a year range.

        :param params: Era, years and optional title (truncated to 120 chars)
        :type params: InferenceParams
        :return: Validated answer, or None on any failure
        :rtype: AIRegionResponse | None
        """
        query = {
            "period": params.era,
            "startYear": str(params.start_year),
            "endYear": str(params.end_year),
        }
        if params.title:
            query["title"] = params.title[:TITLE_MAX_CHARS]

        logger.info(f'Calling AI for "{params.era}" ({params.start_year}–{params.end_year})')
        data = await self._get_json(query, self.timeout_seconds, params.era)
        if data is None:
            return None
        return parse_ai_payload(data)

    async def get_regions_for_period(self, period: str) -> PeriodRegionResult:
        """
        Resolve a bare period name.

        Order: static table, bare country code, per-period cache, AI, fallback.
        """
        key = find_static_key(period)
        if key:
            logger.info(f'Hardcoded: "{period}"')
            return PeriodRegionResult(
                type=RegionType.EMPIRE,
                countries=list(REGION_MAPPINGS[key]),
                timeframe=static_timeframe(key),
                description=f"{key} (hardcoded mapping)",
                source=LookupSource.HARDCODED,
            )

        code = bare_country_code(period)
        if code:
            logger.info(f'Hardcoded (bare code): "{period}"')
            return PeriodRegionResult(
                type=RegionType.COUNTRY,
                countries=[code],
                source=LookupSource.HARDCODED,
            )

        cached = await self.cache.read_region(period)
        if cached:
            logger.info(f'Cache: "{period}" (cached at {cached.timestamp})')
            return PeriodRegionResult(
                type=cached.type,
                countries=cached.countries,
                timeframe=cached.timeframe,
                description=cached.description,
                source=LookupSource.CACHE,
            )

        data = await self._get_json({"period": period}, self.period_timeout_seconds, period)
        if not isinstance(data, dict):
            return guess_fallback(period)

        raw_type = data.get("type")
        region_type = RegionType(raw_type) if raw_type in {t.value for t in RegionType} else RegionType.ERA
        countries = allowed_codes(data.get("countries"))
        if not countries:
            return guess_fallback(period)

        entry = RegionCacheEntry(
            type=region_type,
            countries=countries,
            timeframe=data["timeframe"] if isinstance(data.get("timeframe"), str) else "",
            description=data["description"] if isinstance(data.get("description"), str) else "",
            timestamp=0,
        )
        await self.cache.write_region(period, entry)
        logger.info(f'AI: "{period}" -> {",".join(countries)}')
        return PeriodRegionResult(**entry.model_dump(exclude={"timestamp"}), source=LookupSource.AI)

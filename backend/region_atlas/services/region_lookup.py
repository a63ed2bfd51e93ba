"""
Server side of the region-lookup boundary.

Sanitises the query, asks the LLM, and validates its answer against the ISO
allowlist before anything leaves the service.
"""

import json
import re
from typing import Any

from region_atlas.config import settings
from region_atlas.data.region_mappings import VALID_COUNTRY_CODES
from region_atlas.logging import get_logger
from region_atlas.models import RegionLookupResponse, RegionType, unique_codes
from region_atlas.services.backboard import BackboardService
from region_atlas.services.prompts import build_region_lookup_prompt

logger = get_logger('services.region_lookup')

YEAR_LIMIT = 10000

_UNSAFE_CHARS = re.compile(r"[\x00-\x1f\x7f<>]")


class RegionLookupError(Exception):
    """Lookup failure carrying the HTTP status the boundary should return."""

    status_code = 502


class LookupNotConfiguredError(RegionLookupError):
    status_code = 503


class UpstreamLookupError(RegionLookupError):
    status_code = 502


def sanitize_input(value: str | None, max_chars: int | None = None) -> str:
    """Strip control characters and angle brackets, trim, and cap the length."""
    if not value:
        return ""
    limit = max_chars if max_chars is not None else settings.LOOKUP_INPUT_MAX_CHARS
    return _UNSAFE_CHARS.sub("", value).strip()[:limit]


def parse_year(value: str | int | None) -> int | None:
    if value is None:
        return None
    try:
        year = int(str(value).strip())
    except ValueError:
        return None
    if abs(year) > YEAR_LIMIT:
        return None
    return year


def strip_code_fences(raw: str) -> str:
    text = raw.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def validate_lookup_payload(data: Any) -> RegionLookupResponse:
    """
    Coerce an LLM answer into the boundary payload.

    Unknown types become "era"; countries are upper-cased, filtered to the
    ISO allowlist, deduplicated and capped; text fields are truncated.
    """
    if not isinstance(data, dict):
        return RegionLookupResponse()

    raw_type = data.get("type")
    region_type = RegionType(raw_type) if raw_type in {t.value for t in RegionType} else RegionType.ERA

    raw_countries = data.get("countries")
    countries: list[str] = []
    if isinstance(raw_countries, list):
        countries = unique_codes(
            c.strip().upper()
            for c in raw_countries
            if isinstance(c, str) and c.strip().upper() in VALID_COUNTRY_CODES
        )[:settings.LOOKUP_MAX_COUNTRIES]

    timeframe = data.get("timeframe")
    description = data.get("description")
    return RegionLookupResponse(
        type=region_type,
        countries=countries,
        timeframe=timeframe[:settings.LOOKUP_TIMEFRAME_MAX_CHARS] if isinstance(timeframe, str) else "",
        description=description[:settings.LOOKUP_DESCRIPTION_MAX_CHARS] if isinstance(description, str) else "",
    )


class RegionLookupService:
    """Answers region-lookup queries with the LLM."""

    def __init__(self, backboard: BackboardService):
        self.backboard = backboard

    async def lookup(
        self,
        period: str,
        start_year: str | int | None = None,
        end_year: str | int | None = None,
        title: str | None = None,
    ) -> RegionLookupResponse:
        """
        :raises ValueError: When the period is empty after sanitising
        :raises LookupNotConfiguredError: When no LLM backend is configured
        :raises UpstreamLookupError: When the LLM call fails or returns nothing
        """
        clean_period = sanitize_input(period)
        if not clean_period:
            raise ValueError("Missing period parameter")
        if not self.backboard.is_available:
            raise LookupNotConfiguredError("AI region lookup is not configured")

        start, end = parse_year(start_year), parse_year(end_year)
        if start is None or end is None:
            start = end = None
        prompt = build_region_lookup_prompt(
            clean_period,
            start_year=start,
            end_year=end,
            title=sanitize_input(title) or None,
        )

        chat = await self.backboard.ask(prompt)
        if not chat.success or not chat.response:
            logger.error(f'Region lookup upstream failure for "{clean_period}": {chat.error}')
            raise UpstreamLookupError("Upstream API error")

        try:
            data = json.loads(strip_code_fences(chat.response))
        except json.JSONDecodeError:
            logger.warning(f'Region lookup returned unparsable JSON for "{clean_period}"')
            return RegionLookupResponse()

        result = validate_lookup_payload(data)
        logger.info(f'Region lookup "{clean_period}" -> {result.type.value} [{",".join(result.countries)}]')
        return result

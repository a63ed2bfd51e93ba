"""Lookups against the hardcoded period table."""

from region_atlas.data.region_mappings import REGION_MAPPINGS, REGION_TIMEFRAMES
from region_atlas.models import is_country_code


def bare_country_code(period: str) -> str | None:
    """Return the upper-cased code when the trimmed input is exactly two letters."""
    if not period:
        return None
    code = period.strip().upper()
    return code if is_country_code(code) else None


def find_static_key(period: str) -> str | None:
    """Exact key match first, then case-insensitive."""
    if not period:
        return None
    if period in REGION_MAPPINGS:
        return period
    lower = period.lower()
    for key in REGION_MAPPINGS:
        if key.lower() == lower:
            return key
    return None


def lookup_static(period: str) -> list[str]:
    """
    Return the country codes for a period from the static table.

    Resolution order:
        1. Exact key match
        2. Case-insensitive key match
        3. Bare two-letter input, returned upper-cased
        4. Empty list, so the caller moves on to the next tier
    """
    key = find_static_key(period)
    if key:
        return list(REGION_MAPPINGS[key])
    code = bare_country_code(period)
    if code:
        return [code]
    return []


def static_timeframe(key: str) -> str:
    return REGION_TIMEFRAMES.get(key, "")

"""
Enum definitions for the Era Atlas API.
"""
import re
from enum import Enum


class Confidence(str, Enum):
    """Coarse trust level attached to a resolution."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RegionSource(str, Enum):
    """Which resolver tier produced a region result."""
    TEMPORAL = "temporal"
    HARDCODED = "hardcoded"
    CUSTOM = "custom"
    TITLE_ANALYSIS = "title-analysis"
    AI = "ai"
    FALLBACK = "fallback"


class RegionType(str, Enum):
    """What kind of thing a period label names."""
    COUNTRY = "country"
    EMPIRE = "empire"
    ERA = "era"


class LookupSource(str, Enum):
    """How a single-period lookup was answered."""
    HARDCODED = "hardcoded"
    CACHE = "cache"
    AI = "ai"
    FALLBACK = "fallback"


COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


def is_country_code(value: object) -> bool:
    """True for a 2-letter uppercase ISO 3166-1 alpha-2 shaped string."""
    return isinstance(value, str) and bool(COUNTRY_CODE_PATTERN.match(value))


def unique_codes(codes) -> list[str]:
    """
    Deduplicate country codes while keeping first-seen order.

    Examples:
        ["IT", "FR", "IT"] -> ["IT", "FR"]
    """
    seen: set[str] = set()
    result: list[str] = []
    for code in codes:
        if code not in seen:
            seen.add(code)
            result.append(code)
    return result


def normalize_codes(raw) -> list[str]:
    """
    Normalize user-entered country codes.

    - Accepts a list or a comma/space separated string
    - Uppercases and trims each entry
    - Drops anything that is not exactly two letters

    Examples:
        "fr, de it" -> ["FR", "DE", "IT"]
        ["gb", "usa", 3] -> ["GB"]
    """
    if isinstance(raw, str):
        parts = re.split(r"[,\s]+", raw)
    elif isinstance(raw, (list, tuple, set)):
        parts = [p for p in raw if isinstance(p, str)]
    else:
        return []
    return unique_codes(
        code for code in (p.strip().upper() for p in parts) if is_country_code(code)
    )

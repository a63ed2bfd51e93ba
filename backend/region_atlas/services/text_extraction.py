"""Location hints from titles and descriptions."""

from region_atlas.data.text_patterns import (
    CITY_TO_COUNTRY,
    CIVILIZATION_PATTERNS,
    EVENT_PATTERNS,
)
from region_atlas.models import Confidence, unique_codes


def extract_from_text(text: str) -> list[str]:
    """
    Extract country codes from free text.

    City names, event patterns and civilization patterns are all applied and
    their results unioned. An empty list means no hints were found.

    :param text: Any text, typically era + title + description
    :type text: str
    :return: Unique country codes in discovery order
    :rtype: list[str]
    """
    if not text:
        return []

    found: list[str] = []
    lower = text.lower()

    for city, code in CITY_TO_COUNTRY.items():
        if city in lower:
            found.append(code)

    for pattern, countries in EVENT_PATTERNS:
        if pattern.search(text):
            found.extend(countries)

    for pattern, countries in CIVILIZATION_PATTERNS:
        if pattern.search(text):
            found.extend(countries)

    return unique_codes(found)


def text_analysis_confidence(country_count: int, year_span: int) -> Confidence:
    """Few countries over a short span is a strong hint; long spans are weak."""
    if country_count <= 5 and year_span <= 50:
        return Confidence.HIGH
    if year_span < 100:
        return Confidence.MEDIUM
    return Confidence.LOW

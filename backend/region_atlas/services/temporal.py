"""Year-aware resolution against the temporal mapping table."""

from region_atlas.data.region_mappings import REGION_MAPPINGS
from region_atlas.data.temporal_regions import TEMPORAL_MODIFIERS
from region_atlas.models import TemporalMapping, TemporalResult, unique_codes

DEFAULT_NOTE = "Default mapping (peak period)"


def find_temporal_mapping(
    era: str,
    table: dict[str, TemporalMapping] = TEMPORAL_MODIFIERS,
) -> TemporalMapping | None:
    wanted = era.strip().lower()
    for name, mapping in table.items():
        if name.lower() == wanted:
            return mapping
    return None


def resolve_temporal(
    era: str,
    start_year: int,
    end_year: int,
    table: dict[str, TemporalMapping] = TEMPORAL_MODIFIERS,
) -> TemporalResult | None:
    """
    Resolve the countries of a named period for a year range.

    Slices are checked in declaration order and the first match wins. With
    no matching slice the period's default (peak) set is returned.

    :param era: Period name, matched case-insensitively
    :type era: str
    :param start_year: First year of the range (negative for BC)
    :type start_year: int
    :param end_year: Last year of the range (negative for BC)
    :type end_year: int
    :return: Countries and the note of the slice that produced them, or None for unknown periods
    :rtype: TemporalResult | None
    """
    mapping = find_temporal_mapping(era, table)
    if mapping is None:
        return None

    for temporal_slice in mapping.slices:
        if not temporal_slice.matches(start_year, end_year):
            continue
        if temporal_slice.countries is not None:
            return TemporalResult(countries=list(temporal_slice.countries), note=temporal_slice.note)
        removed = set(temporal_slice.remove)
        countries = [c for c in mapping.default if c not in removed]
        countries = unique_codes([*countries, *temporal_slice.add])
        return TemporalResult(countries=countries, note=temporal_slice.note)

    return TemporalResult(countries=list(mapping.default), note=DEFAULT_NOTE)


def known_era_names() -> list[str]:
    """All period names the static tables know, for autocomplete."""
    names: list[str] = []
    seen: set[str] = set()
    for name in [*TEMPORAL_MODIFIERS, *REGION_MAPPINGS]:
        if name.lower() not in seen:
            seen.add(name.lower())
            names.append(name)
    return names

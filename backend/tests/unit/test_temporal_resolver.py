import pytest

from region_atlas.data.region_mappings import REGION_MAPPINGS
from region_atlas.data.temporal_regions import TEMPORAL_MODIFIERS
from region_atlas.models import TemporalMapping, TemporalSlice
from region_atlas.services.temporal import DEFAULT_NOTE, known_era_names, resolve_temporal


def _interior_range_slices():
    cases = []
    for era, mapping in TEMPORAL_MODIFIERS.items():
        for temporal_slice in mapping.slices:
            if temporal_slice.range is None:
                continue
            low, high = temporal_slice.range
            if high - low >= 2:
                cases.append(pytest.param(era, temporal_slice, id=f"{era}:{low}..{high}"))
    return cases


def _expected_countries(mapping: TemporalMapping, temporal_slice: TemporalSlice) -> set[str]:
    if temporal_slice.countries is not None:
        return set(temporal_slice.countries)
    return (set(mapping.default) - set(temporal_slice.remove)) | set(temporal_slice.add)


def _unmatched_year(mapping: TemporalMapping) -> int | None:
    for year in (-6000, 6000):
        if not any(s.matches(year, year) for s in mapping.slices):
            return year
    return None


def _periods_with_gap():
    return [
        pytest.param(era, year, id=era)
        for era, mapping in TEMPORAL_MODIFIERS.items()
        if (year := _unmatched_year(mapping)) is not None
    ]


def test_table_carries_all_eighteen_periods() -> None:
    assert len(TEMPORAL_MODIFIERS) == 18
    assert {"Roman Empire", "Viking Age", "Silk Road", "Colonial Americas"} <= set(TEMPORAL_MODIFIERS)


@pytest.mark.parametrize("era, temporal_slice", _interior_range_slices())
def test_year_inside_slice_returns_slice_set(era: str, temporal_slice: TemporalSlice) -> None:
    low, high = temporal_slice.range
    year = low + 1
    result = resolve_temporal(era, year, year)

    assert result is not None
    assert result.note == temporal_slice.note
    assert set(result.countries) == _expected_countries(TEMPORAL_MODIFIERS[era], temporal_slice)


@pytest.mark.parametrize("era, year", _periods_with_gap())
def test_unmatched_years_return_default_with_default_note(era: str, year: int) -> None:
    result = resolve_temporal(era, year, year)

    assert result is not None
    assert result.countries == TEMPORAL_MODIFIERS[era].default
    assert result.note == DEFAULT_NOTE


@pytest.mark.parametrize("era", list(TEMPORAL_MODIFIERS))
def test_lookup_is_case_insensitive(era: str) -> None:
    assert resolve_temporal(era.lower(), 1000, 1010) == resolve_temporal(era, 1000, 1010)
    assert resolve_temporal(era.upper(), 1000, 1010) == resolve_temporal(era, 1000, 1010)


def test_viking_early_raids() -> None:
    result = resolve_temporal("Viking Age", 800, 850)

    assert set(result.countries) == {"NO", "SE", "DK", "GB", "IE"}
    assert "Default" not in result.note


def test_add_and_remove_keep_default_order() -> None:
    result = resolve_temporal("World War I", 1917, 1918)

    assert "RU" in result.countries  # the 1915-1917 slice matches first at 1917
    result = resolve_temporal("Cold War", 1956, 1960)
    assert result.countries[:3] == ["US", "RU", "DE"]
    assert result.countries.count("VN") == 1


def test_remove_slice_drops_countries() -> None:
    result = resolve_temporal("Byzantine Empire", 600, 700)

    assert not {"EG", "IL", "SY", "LB"} & set(result.countries)


def test_bc_years_use_signed_comparison() -> None:
    regal = resolve_temporal("Roman Empire", -700, -600)
    republic = resolve_temporal("Roman Empire", -300, -200)

    assert regal.countries == ["IT"]
    assert "Republic" in republic.note
    assert "GB" not in republic.countries


def test_overlap_uses_first_declared_slice() -> None:
    # 100-200 overlaps both the imperial peak and the contraction slice
    result = resolve_temporal("Roman Empire", 100, 200)

    assert result.note.startswith("Imperial peak")


def test_unknown_era_returns_none() -> None:
    assert resolve_temporal("Atlantis", 100, 200) is None


def test_custom_table_is_honoured() -> None:
    table = {
        "Test Era": TemporalMapping(
            default=["AA", "BB"],
            slices=[TemporalSlice(after=100, add=["CC"], remove=["AA"], note="late")],
        )
    }

    assert resolve_temporal("test era", 150, 160, table).countries == ["BB", "CC"]
    assert resolve_temporal("test era", 50, 60, table).note == DEFAULT_NOTE


def test_slice_requires_exactly_one_bound() -> None:
    with pytest.raises(ValueError):
        TemporalSlice(note="none")
    with pytest.raises(ValueError):
        TemporalSlice(before=10, after=5, note="both")
    with pytest.raises(ValueError):
        TemporalSlice(range=(10, 5), note="reversed")
    with pytest.raises(ValueError):
        TemporalSlice(before=10, countries=["FR"], add=["DE"], note="mixed")


def test_known_era_names_deduplicates_static_periods() -> None:
    names = known_era_names()

    assert len(names) == len({n.lower() for n in names})
    assert set(REGION_MAPPINGS) <= set(names)
    assert "Han Dynasty" in names

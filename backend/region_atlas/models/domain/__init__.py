"""Domain models for the Era Atlas API."""

from region_atlas.models.domain.region import (
    InferenceParams,
    RegionResult,
    PeriodRegionResult,
)
from region_atlas.models.domain.temporal import (
    TemporalSlice,
    TemporalMapping,
    TemporalResult,
)
from region_atlas.models.domain.mapping import (
    CustomMappingUpsert,
    CustomMapping,
    CustomMappingImportResult,
    CachedInference,
    RegionCacheEntry,
    CacheStats,
)

__all__ = [
    "InferenceParams", "RegionResult", "PeriodRegionResult",
    "TemporalSlice", "TemporalMapping", "TemporalResult",
    "CustomMappingUpsert", "CustomMapping", "CustomMappingImportResult",
    "CachedInference", "RegionCacheEntry", "CacheStats",
]

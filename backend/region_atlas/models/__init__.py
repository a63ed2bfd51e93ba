"""
Era Atlas models.

Usage:
    from region_atlas.models import InferenceParams, RegionResult, Confidence, RegionSource
    from region_atlas.models import CustomMapping, RegionCacheEntry, CacheStats
    from region_atlas.models import AIRegionResponse, RegionLookupResponse
"""

# --- Enums & utilities ---
from region_atlas.models.enums import (
    Confidence,
    RegionSource,
    RegionType,
    LookupSource,
    is_country_code,
    normalize_codes,
    unique_codes,
)

# --- Domain models ---
from region_atlas.models.domain import (
    InferenceParams, RegionResult, PeriodRegionResult,
    TemporalSlice, TemporalMapping, TemporalResult,
    CustomMappingUpsert, CustomMapping, CustomMappingImportResult,
    CachedInference, RegionCacheEntry, CacheStats,
)

# --- Result models ---
from region_atlas.models.results import (
    BackboardResult,
    AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
    AIRegionResponse, RegionLookupResponse,
)

__all__ = [
    # Enums
    "Confidence", "RegionSource", "RegionType", "LookupSource",
    "is_country_code", "normalize_codes", "unique_codes",
    # Domain
    "InferenceParams", "RegionResult", "PeriodRegionResult",
    "TemporalSlice", "TemporalMapping", "TemporalResult",
    "CustomMappingUpsert", "CustomMapping", "CustomMappingImportResult",
    "CachedInference", "RegionCacheEntry", "CacheStats",
    # Results
    "BackboardResult",
    "AssistantCreated", "ThreadCreated", "ThreadDeleted", "ChatResponse",
    "AIRegionResponse", "RegionLookupResponse",
]

"""Custom mapping and cache domain models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from region_atlas.models.enums import RegionType, normalize_codes
from region_atlas.models.domain.region import RegionResult


class CustomMappingUpsert(BaseModel):
    """Payload for creating or replacing a custom mapping."""

    countries: list[str] = Field(default_factory=list)
    timeframe: str = ""
    description: str = ""

    @field_validator("countries", mode="before")
    @classmethod
    def clean_countries(cls, value):
        return normalize_codes(value)


class CustomMapping(CustomMappingUpsert):
    """A user-authored override for a period, keyed case-insensitively."""

    period: str


class CustomMappingImportResult(BaseModel):
    """Summary of a bulk import."""

    imported: int
    periods: list[str] = Field(default_factory=list)


class CachedInference(RegionResult):
    """An inference cache entry: the result payload plus when it was stored."""

    cached_at: datetime


class RegionCacheEntry(BaseModel):
    """A per-period AI lookup cache entry."""

    type: RegionType = RegionType.ERA
    countries: list[str] = Field(default_factory=list)
    timeframe: str = ""
    description: str = ""
    timestamp: int = Field(description="Unix milliseconds when the entry was written.")


class CacheStats(BaseModel):
    """Statistics about the per-period region cache."""

    entries: int = 0
    size_kb: float = 0.0
    oldest: Optional[int] = None
    newest: Optional[int] = None

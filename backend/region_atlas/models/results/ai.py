"""Result models for AI region lookups."""

from pydantic import BaseModel, Field
from typing import Optional

from region_atlas.models.enums import Confidence, RegionType


class AIRegionResponse(BaseModel):
    """An AI answer after client-side validation."""

    countries: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.LOW
    reasoning: str = ""
    suggestions: Optional[list[str]] = None


class RegionLookupResponse(BaseModel):
    """Payload returned by the region-lookup HTTP boundary."""

    type: RegionType = RegionType.ERA
    countries: list[str] = Field(default_factory=list)
    timeframe: str = ""
    description: str = ""

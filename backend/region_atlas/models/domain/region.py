"""Region inference domain models."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from region_atlas.models.enums import Confidence, LookupSource, RegionSource, RegionType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InferenceParams(BaseModel):
    """Input to the region resolver: an era label plus a year range."""

    era: str = Field(description='Free-text period label, e.g. "Viking Age" or "FR".')
    start_year: int = Field(
        validation_alias=AliasChoices("start_year", "startYear"),
        description="First year of the range; negative years are BC.",
    )
    end_year: int = Field(
        validation_alias=AliasChoices("end_year", "endYear"),
        description="Last year of the range; negative years are BC.",
    )
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("era")
    @classmethod
    def era_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("era must not be empty")
        return value

    @property
    def year_span(self) -> int:
        return self.end_year - self.start_year


class RegionResult(BaseModel):
    """A resolved set of modern countries for a period. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    countries: list[str] = Field(default_factory=list)
    confidence: Confidence
    reasoning: str
    source: RegionSource
    suggestions: Optional[list[str]] = None
    resolved_at: datetime = Field(default_factory=_utcnow)


class PeriodRegionResult(BaseModel):
    """Answer of a single-period lookup (no year range)."""

    type: RegionType
    countries: list[str] = Field(default_factory=list)
    timeframe: str = ""
    description: str = ""
    source: LookupSource

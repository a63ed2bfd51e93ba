"""Temporal mapping models: date-bounded slices of a period's country set."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemporalSlice(BaseModel):
    """
    A date-bounded rule narrowing a period to part of its existence.

    Exactly one bound is set:
        before: matches when the requested end year is strictly earlier
        after : matches when the requested start year is strictly later
        range : matches when the requested interval overlaps [a, b]

    The slice either replaces the default set (``countries``) or adjusts it
    (``remove`` then ``add``).
    """

    model_config = ConfigDict(frozen=True)

    before: Optional[int] = None
    after: Optional[int] = None
    range: Optional[tuple[int, int]] = None
    countries: Optional[list[str]] = None
    add: list[str] = Field(default_factory=list)
    remove: list[str] = Field(default_factory=list)
    note: str

    @model_validator(mode="after")
    def check_bounds(self):
        bounds = [b for b in (self.before, self.after, self.range) if b is not None]
        if len(bounds) != 1:
            raise ValueError("a temporal slice needs exactly one of before, after or range")
        if self.range is not None and self.range[0] > self.range[1]:
            raise ValueError(f"range start {self.range[0]} is after range end {self.range[1]}")
        if self.countries is not None and (self.add or self.remove):
            raise ValueError("a slice with explicit countries cannot also add or remove")
        return self

    def matches(self, start_year: int, end_year: int) -> bool:
        if self.before is not None:
            return end_year < self.before
        if self.after is not None:
            return start_year > self.after
        low, high = self.range
        return start_year <= high and end_year >= low


class TemporalMapping(BaseModel):
    """Peak-extent country set of a period plus its ordered slices."""

    model_config = ConfigDict(frozen=True)

    default: list[str]
    slices: list[TemporalSlice] = Field(default_factory=list)


class TemporalResult(BaseModel):
    """Countries chosen by the temporal resolver and the note explaining why."""

    countries: list[str]
    note: str

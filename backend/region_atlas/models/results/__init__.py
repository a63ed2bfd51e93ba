"""Result models for service operations."""

from region_atlas.models.results.backboard import (
    BackboardResult, AssistantCreated, ThreadCreated, ThreadDeleted, ChatResponse,
)
from region_atlas.models.results.ai import AIRegionResponse, RegionLookupResponse

__all__ = [
    "BackboardResult", "AssistantCreated", "ThreadCreated", "ThreadDeleted", "ChatResponse",
    "AIRegionResponse", "RegionLookupResponse",
]

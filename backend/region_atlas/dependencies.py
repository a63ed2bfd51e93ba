"""
Dependency injection for FastAPI routes.

Provides typed service dependencies that enable IDE navigation (Ctrl+Click).
"""

from typing import Annotated
from fastapi import Request, Depends

from region_atlas.services.custom_mappings import CustomMappingService
from region_atlas.services.rate_limiter import SlidingWindowRateLimiter
from region_atlas.services.region_ai import RegionAIClient
from region_atlas.services.region_cache import RegionCacheService
from region_atlas.services.region_inference import RegionInferenceService
from region_atlas.services.region_lookup import RegionLookupService


def get_region_cache(request: Request) -> RegionCacheService:
    return request.app.state.region_cache


def get_custom_mapping_service(request: Request) -> CustomMappingService:
    return request.app.state.custom_mapping_service


def get_region_ai_client(request: Request) -> RegionAIClient:
    return request.app.state.region_ai_client


def get_inference_service(request: Request) -> RegionInferenceService:
    return request.app.state.inference_service


def get_lookup_service(request: Request) -> RegionLookupService:
    return request.app.state.lookup_service


def get_rate_limiter(request: Request) -> SlidingWindowRateLimiter:
    return request.app.state.rate_limiter


RegionCacheDep = Annotated[RegionCacheService, Depends(get_region_cache)]
CustomMappingServiceDep = Annotated[CustomMappingService, Depends(get_custom_mapping_service)]
RegionAIClientDep = Annotated[RegionAIClient, Depends(get_region_ai_client)]
InferenceServiceDep = Annotated[RegionInferenceService, Depends(get_inference_service)]
LookupServiceDep = Annotated[RegionLookupService, Depends(get_lookup_service)]
RateLimiterDep = Annotated[SlidingWindowRateLimiter, Depends(get_rate_limiter)]

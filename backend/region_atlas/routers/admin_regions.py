"""Admin endpoints for custom region mappings and the region caches."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from region_atlas.models import (
    CacheStats,
    CustomMapping,
    CustomMappingImportResult,
    CustomMappingUpsert,
    InferenceParams,
    RegionCacheEntry,
)
from region_atlas.dependencies import CustomMappingServiceDep, RegionCacheDep

router = APIRouter()


# ── Custom mappings ──

@router.get("/custom", response_model=list[CustomMapping])
async def list_custom_mappings(service: CustomMappingServiceDep):
    return await service.list_mappings()


@router.delete("/custom")
async def clear_custom_mappings(service: CustomMappingServiceDep):
    removed = await service.clear_mappings()
    return {"status": "cleared", "removed": removed}


@router.post("/custom/import", response_model=CustomMappingImportResult)
async def import_custom_mappings(request: Request, service: CustomMappingServiceDep):
    text = (await request.body()).decode("utf-8", errors="replace")
    try:
        return await service.import_mappings(text)
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc


@router.get("/custom/export.json")
async def export_custom_mappings_json(service: CustomMappingServiceDep):
    return await service.export_json()


@router.get("/custom/export.csv")
async def export_custom_mappings_csv(service: CustomMappingServiceDep):
    return Response(
        content=await service.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="region-mappings.csv"'},
    )


@router.get("/custom/{period}", response_model=CustomMapping)
async def get_custom_mapping(period: str, service: CustomMappingServiceDep):
    mapping = await service.get_mapping(period)
    if not mapping:
        raise HTTPException(404, "Custom mapping not found")
    return mapping


@router.put("/custom/{period}", response_model=CustomMapping)
async def set_custom_mapping(period: str, body: CustomMappingUpsert, service: CustomMappingServiceDep):
    try:
        return await service.set_mapping(period, body)
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc


@router.delete("/custom/{period}")
async def delete_custom_mapping(period: str, service: CustomMappingServiceDep):
    deleted = await service.delete_mapping(period)
    if not deleted:
        raise HTTPException(404, "Custom mapping not found")
    return {"status": "deleted", "period": period}


# ── Caches ──

@router.get("/cache/stats", response_model=CacheStats)
async def region_cache_stats(cache: RegionCacheDep):
    return await cache.region_cache_stats()


@router.get("/cache/regions", response_model=dict[str, RegionCacheEntry])
async def list_cached_regions(cache: RegionCacheDep):
    return await cache.list_regions()


@router.post("/cache/regions/{period}/promote", response_model=CustomMapping)
async def promote_cached_region(period: str, service: CustomMappingServiceDep):
    mapping = await service.promote_cached(period)
    if not mapping:
        raise HTTPException(404, "No cached lookup for this period")
    return mapping


@router.delete("/cache/regions/{period}")
async def clear_cached_region(period: str, cache: RegionCacheDep):
    deleted = await cache.clear_region_entry(period)
    if not deleted:
        raise HTTPException(404, "No cached lookup for this period")
    return {"status": "deleted", "period": period}


@router.delete("/cache/inference")
async def clear_inference_cache(
    cache: RegionCacheDep,
    era: str | None = None,
    startYear: int | None = None,
    endYear: int | None = None,
):
    provided = [v is not None for v in (era, startYear, endYear)]
    if not any(provided):
        removed = await cache.clear_inference_cache()
        return {"status": "cleared", "removed": removed}
    if not all(provided):
        raise HTTPException(400, "era, startYear and endYear must be given together")

    try:
        params = InferenceParams(era=era, start_year=startYear, end_year=endYear)
    except ValueError as exc:
        raise HTTPException(400, "era must not be empty") from exc
    deleted = await cache.clear_inference_entry(params)
    if not deleted:
        raise HTTPException(404, "No cached inference for these parameters")
    return {"status": "deleted", "era": era, "startYear": startYear, "endYear": endYear}


@router.delete("/cache")
async def clear_all_caches(cache: RegionCacheDep):
    removed = await cache.clear_all()
    return {"status": "cleared", "removed": removed}

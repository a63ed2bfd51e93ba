"""Region inference endpoints."""

from fastapi import APIRouter, HTTPException, Query

from region_atlas.models import InferenceParams, PeriodRegionResult, RegionResult
from region_atlas.dependencies import InferenceServiceDep, RegionAIClientDep
from region_atlas.services.temporal import known_era_names

router = APIRouter()


@router.post("/infer", response_model=RegionResult)
async def infer_regions(body: InferenceParams, service: InferenceServiceDep):
    return await service.infer_regions(body)


@router.get("/period", response_model=PeriodRegionResult)
async def get_regions_for_period(client: RegionAIClientDep, period: str = Query(...)):
    if not period.strip():
        raise HTTPException(400, "Period must not be empty")
    return await client.get_regions_for_period(period.strip())


@router.get("/eras", response_model=list[str])
async def list_known_eras():
    return known_era_names()

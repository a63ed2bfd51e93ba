"""AI region-lookup endpoint, called by RegionAIClient."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from region_atlas.models import RegionLookupResponse
from region_atlas.dependencies import LookupServiceDep, RateLimiterDep
from region_atlas.logging import get_logger
from region_atlas.services.rate_limiter import client_identity
from region_atlas.services.region_lookup import RegionLookupError

logger = get_logger('routers.region_lookup')

router = APIRouter()


@router.get("", response_model=RegionLookupResponse)
async def region_lookup(
    request: Request,
    service: LookupServiceDep,
    limiter: RateLimiterDep,
    period: str | None = None,
    startYear: str | None = None,
    endYear: str | None = None,
    title: str | None = None,
):
    client_key = client_identity(
        request.headers.get("x-forwarded-for"),
        request.headers.get("x-real-ip"),
        request.client.host if request.client else None,
    )
    if not limiter.allow(client_key):
        logger.warning(f"Rate limit exceeded for {client_key}")
        return JSONResponse(
            status_code=429,
            content={"error": "Too many requests. Please try again later."},
            headers={"Retry-After": str(limiter.retry_after_seconds)},
        )

    try:
        return await service.lookup(period or "", startYear, endYear, title)
    except ValueError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except RegionLookupError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

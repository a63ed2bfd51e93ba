"""
Era Atlas - FastAPI Backend
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from region_atlas.config import settings
from region_atlas.database.db import init_db
from region_atlas.logging import setup_logging, get_logger
from region_atlas.routers import (
    admin_regions,
    region_lookup,
    regions,
)
from region_atlas.services.backboard import BackboardService
from region_atlas.services.custom_mappings import CustomMappingService
from region_atlas.services.kv_store import SqliteKeyValueStore
from region_atlas.services.rate_limiter import SlidingWindowRateLimiter
from region_atlas.services.region_ai import RegionAIClient
from region_atlas.services.region_cache import RegionCacheService
from region_atlas.services.region_inference import RegionInferenceService
from region_atlas.services.region_lookup import RegionLookupService

logger = get_logger('main')


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(debug=settings.DEBUG)
    logger.info("Starting Era Atlas API")

    await init_db()
    logger.info("Database initialized")

    # Initialize services
    backboard = BackboardService()
    await backboard.initialize()
    app.state.backboard = backboard

    store = SqliteKeyValueStore(db_path=settings.DATABASE_PATH)
    app.state.region_cache = RegionCacheService(store=store)
    app.state.custom_mapping_service = CustomMappingService(
        store=store,
        cache=app.state.region_cache,
    )
    app.state.region_ai_client = RegionAIClient(
        lookup_url=settings.REGION_LOOKUP_URL,
        cache=app.state.region_cache,
        timeout_seconds=settings.AI_TIMEOUT_SECONDS,
        period_timeout_seconds=settings.PERIOD_AI_TIMEOUT_SECONDS,
    )
    app.state.inference_service = RegionInferenceService(
        cache=app.state.region_cache,
        custom=app.state.custom_mapping_service,
        ai_client=app.state.region_ai_client,
    )
    app.state.lookup_service = RegionLookupService(backboard=backboard)
    app.state.rate_limiter = SlidingWindowRateLimiter(
        limit=settings.RATE_LIMIT_REQUESTS,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    logger.info("Services initialized")

    yield

    logger.info("Shutting down application")
    await app.state.region_ai_client.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Era Atlas API",
        description="Infers the modern countries covered by historical periods",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(regions.router, prefix="/api/regions", tags=["Regions"])
    app.include_router(region_lookup.router, prefix="/api/region-lookup", tags=["Region Lookup"])
    app.include_router(admin_regions.router, prefix="/api/admin/regions", tags=["Admin: Regions"])

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "era-atlas",
            "backboard_available": app.state.backboard.is_available if hasattr(app.state, 'backboard') else False,
        }

    @app.get("/")
    async def root():
        return {
            "name": "Era Atlas API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app

"""
Fleetboard - FastAPI Application
Main entry point for the fleet dashboard API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.config import get_settings
from fleetboard.core.errors import register_error_handlers
from fleetboard.core.logging_config import configure_logging
from fleetboard.database import get_db
from fleetboard.api import (
    orders_router,
    drivers_router,
    vehicles_router,
    fleet_feed_router,
    fleet_router,
    payouts_router,
    topups_router,
    pricing_router,
    analytics_router,
)


settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting {settings.app_title} v{settings.app_version} ({settings.app_env})")
    
    from fleetboard.database import init_db
    await init_db()
    logger.info("Database tables initialized")
    
    yield
    logger.info("Shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="""
    ## Fleetboard API
    
    Backend for the fleet-management dashboard.
    
    ### Conventions
    - Every list endpoint accepts `page`, `pageSize`, `search`, `sort`, `direction`
      and returns `{data, total, page, pageSize, totalPages}`.
    - Each record exposes its business key as `id`.
    - Failures return `{"error": "Internal Server Error"}` with status 500.
    
    ### Main Endpoints
    - `GET /api/orders` - Orders table
    - `GET /api/drivers` - Drivers table
    - `GET /api/vehicles` - Vehicles table
    - `GET /api/fleet` / `GET /api/fleet/all` - Live fleet table and map feed
    - `GET /api/payouts` (also `/api/topups`) - Driver payouts
    - `GET /api/pricing` - Pricing rules
    - `GET /api/analytics` - Analytics report
    """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# fleet_feed_router first so /fleet/all is matched before /fleet/{record_id}
app.include_router(orders_router, prefix=settings.api_prefix)
app.include_router(drivers_router, prefix=settings.api_prefix)
app.include_router(vehicles_router, prefix=settings.api_prefix)
app.include_router(fleet_feed_router, prefix=settings.api_prefix)
app.include_router(fleet_router, prefix=settings.api_prefix)
app.include_router(payouts_router, prefix=settings.api_prefix)
app.include_router(topups_router, prefix=settings.api_prefix)
app.include_router(pricing_router, prefix=settings.api_prefix)
app.include_router(analytics_router, prefix=settings.api_prefix)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
    }


@app.get("/health", tags=["Health"])
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check including a database round trip."""
    try:
        await db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check database failure: {e}")
        database = "unavailable"
    
    return {
        "status": "healthy" if database == "connected" else "degraded",
        "database": database,
    }

"""
Analytics API endpoint.
Handles GET /api/analytics for the analytics screen.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.database import get_db
from fleetboard.schemas.analytics import AnalyticsResponse
from fleetboard.services.analytics_service import get_analytics

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "",
    response_model=AnalyticsResponse,
    summary="Analytics report",
    description="Stat tiles, monthly performance and order status distribution.",
)
async def analytics_report(
    db: AsyncSession = Depends(get_db),
) -> AnalyticsResponse:
    return await get_analytics(db)

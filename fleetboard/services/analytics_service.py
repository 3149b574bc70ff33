"""
Analytics report service.
Reads the seeded report tables behind the analytics screen.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.models import Stat, MonthlyPerformance, StatusDistribution
from fleetboard.schemas.analytics import (
    AnalyticsResponse,
    StatResponse,
    MonthlyPerformanceResponse,
    StatusDistributionResponse,
)


async def get_analytics(db: AsyncSession) -> AnalyticsResponse:
    """Collect stat tiles, monthly performance and status distribution."""
    stats = (
        await db.execute(select(Stat).order_by(Stat.position, Stat.id))
    ).scalars().all()
    monthly = (
        await db.execute(
            select(MonthlyPerformance).order_by(MonthlyPerformance.position, MonthlyPerformance.id)
        )
    ).scalars().all()
    distribution = (
        await db.execute(select(StatusDistribution).order_by(StatusDistribution.status))
    ).scalars().all()
    
    return AnalyticsResponse(
        stats=[StatResponse.model_validate(s) for s in stats],
        monthly_performance=[MonthlyPerformanceResponse.model_validate(m) for m in monthly],
        status_distribution=[StatusDistributionResponse.model_validate(d) for d in distribution],
    )

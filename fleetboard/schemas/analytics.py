"""
Pydantic schemas for GET /api/analytics.
"""

from typing import List

from pydantic import ConfigDict

from fleetboard.schemas.common import CamelModel


class StatResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    
    label: str
    value: str
    change: str
    trend: str


class MonthlyPerformanceResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    
    month: str
    revenue: float
    deliveries: int


class StatusDistributionResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    
    status: str
    count: int


class AnalyticsResponse(CamelModel):
    """Everything the analytics screen renders in one payload."""
    stats: List[StatResponse]
    monthly_performance: List[MonthlyPerformanceResponse]
    status_distribution: List[StatusDistributionResponse]

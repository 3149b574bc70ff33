"""Pydantic schemas package."""

from fleetboard.schemas.common import (
    CamelModel,
    PageEnvelope,
    RecordList,
    CreatedResponse,
    BulkUpdateRequest,
    BulkDeleteRequest,
    BatchResult,
    ErrorResponse,
)
from fleetboard.schemas.orders import OrderResponse, OrderCreate, OrderUpdate
from fleetboard.schemas.drivers import DriverResponse, DriverCreate, DriverUpdate
from fleetboard.schemas.vehicles import VehicleResponse, VehicleCreate, VehicleUpdate
from fleetboard.schemas.fleet import FleetItemResponse, FleetItemCreate, FleetItemUpdate
from fleetboard.schemas.payouts import PayoutResponse, PayoutCreate, PayoutUpdate
from fleetboard.schemas.pricing import PricingRuleResponse, PricingRuleCreate, PricingRuleUpdate
from fleetboard.schemas.analytics import (
    StatResponse,
    MonthlyPerformanceResponse,
    StatusDistributionResponse,
    AnalyticsResponse,
)

__all__ = [
    # Common
    "CamelModel",
    "PageEnvelope",
    "RecordList",
    "CreatedResponse",
    "BulkUpdateRequest",
    "BulkDeleteRequest",
    "BatchResult",
    "ErrorResponse",
    # Records
    "OrderResponse",
    "OrderCreate",
    "OrderUpdate",
    "DriverResponse",
    "DriverCreate",
    "DriverUpdate",
    "VehicleResponse",
    "VehicleCreate",
    "VehicleUpdate",
    "FleetItemResponse",
    "FleetItemCreate",
    "FleetItemUpdate",
    "PayoutResponse",
    "PayoutCreate",
    "PayoutUpdate",
    "PricingRuleResponse",
    "PricingRuleCreate",
    "PricingRuleUpdate",
    # Analytics
    "StatResponse",
    "MonthlyPerformanceResponse",
    "StatusDistributionResponse",
    "AnalyticsResponse",
]

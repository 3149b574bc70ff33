"""API routers package initialization."""

from fleetboard.api.records import build_record_router
from fleetboard.api.fleet import router as fleet_feed_router
from fleetboard.api.analytics import router as analytics_router
from fleetboard.services.registry import ORDERS, DRIVERS, VEHICLES, FLEET, PAYOUTS, PRICING

orders_router = build_record_router(ORDERS)
drivers_router = build_record_router(DRIVERS)
vehicles_router = build_record_router(VEHICLES)
fleet_router = build_record_router(FLEET)
payouts_router = build_record_router(PAYOUTS)
topups_router = build_record_router(PAYOUTS, path="topups")
pricing_router = build_record_router(PRICING)

__all__ = [
    "build_record_router",
    "orders_router",
    "drivers_router",
    "vehicles_router",
    "fleet_router",
    "fleet_feed_router",
    "payouts_router",
    "topups_router",
    "pricing_router",
    "analytics_router",
]

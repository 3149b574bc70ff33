"""Models package initialization - imports all models for easy access."""

from fleetboard.models.order import Order
from fleetboard.models.driver import Driver
from fleetboard.models.vehicle import Vehicle
from fleetboard.models.fleet_item import FleetItem
from fleetboard.models.payout import Payout
from fleetboard.models.pricing_rule import PricingRule
from fleetboard.models.analytics import Stat, MonthlyPerformance, StatusDistribution

__all__ = [
    # Dashboard records
    "Order",
    "Driver",
    "Vehicle",
    "FleetItem",
    "Payout",
    "PricingRule",
    # Analytics
    "Stat",
    "MonthlyPerformance",
    "StatusDistribution",
]

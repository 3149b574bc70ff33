"""
Per-entity configuration for the generic list and mutation services.

Each dashboard screen is described by one ``EntityConfig``: which model backs
it, which column is its business key, which columns free-text search looks
at, and how it pages and orders by default.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_snake
from sqlalchemy import Uuid, inspect as sa_inspect

from fleetboard.models import Order, Driver, Vehicle, FleetItem, Payout, PricingRule
from fleetboard.schemas import (
    OrderResponse, OrderCreate, OrderUpdate,
    DriverResponse, DriverCreate, DriverUpdate,
    VehicleResponse, VehicleCreate, VehicleUpdate,
    FleetItemResponse, FleetItemCreate, FleetItemUpdate,
    PayoutResponse, PayoutCreate, PayoutUpdate,
    PricingRuleResponse, PricingRuleCreate, PricingRuleUpdate,
)


ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)


@dataclass(frozen=True)
class EntityConfig:
    """How one record type is listed, searched, sorted and addressed."""
    name: str
    label: str
    model: type
    key_field: str
    response_schema: Type[BaseModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    searchable_fields: Tuple[str, ...]
    default_page_size: int = 5
    default_direction: str = ASC
    default_sort: str = "created_at"
    default_sort_direction: str = DESC
    direction_applies_to_default: bool = False
    
    @property
    def key_column(self):
        return getattr(self.model, self.key_field)
    
    @property
    def key_is_uuid(self) -> bool:
        """True when the key column stores UUIDs, so raw ids must parse as one."""
        return isinstance(self.key_column.type, Uuid)
    
    @property
    def sortable_fields(self) -> FrozenSet[str]:
        """Column attributes a client may order by (surrogate id excluded)."""
        columns = {attr.key for attr in sa_inspect(self.model).column_attrs}
        columns.discard("id")
        return frozenset(columns)
    
    def resolve_sort_field(self, name: Optional[str]) -> Optional[str]:
        """
        Map a client sort name to a model attribute.
        
        ``"id"`` is an alias for the business key. camelCase names are
        converted to snake_case. Unknown names resolve to None so the caller
        falls back to the default ordering.
        """
        if not name:
            return None
        if name == "id":
            return self.key_field
        attr = to_snake(name)
        if attr in self.sortable_fields:
            return attr
        return None


ORDERS = EntityConfig(
    name="orders",
    label="order",
    model=Order,
    key_field="order_id",
    response_schema=OrderResponse,
    create_schema=OrderCreate,
    update_schema=OrderUpdate,
    searchable_fields=("order_id", "customer", "destination"),
    default_direction=DESC,
    direction_applies_to_default=True,
)

DRIVERS = EntityConfig(
    name="drivers",
    label="driver",
    model=Driver,
    key_field="driver_id",
    response_schema=DriverResponse,
    create_schema=DriverCreate,
    update_schema=DriverUpdate,
    searchable_fields=("name", "driver_id", "status"),
)

VEHICLES = EntityConfig(
    name="vehicles",
    label="vehicle",
    model=Vehicle,
    key_field="vehicle_id",
    response_schema=VehicleResponse,
    create_schema=VehicleCreate,
    update_schema=VehicleUpdate,
    searchable_fields=("vehicle_id", "model", "vin", "current_driver"),
)

FLEET = EntityConfig(
    name="fleet",
    label="fleet item",
    model=FleetItem,
    key_field="vehicle_id",
    response_schema=FleetItemResponse,
    create_schema=FleetItemCreate,
    update_schema=FleetItemUpdate,
    searchable_fields=("vehicle_id", "driver", "location"),
)

PAYOUTS = EntityConfig(
    name="payouts",
    label="payout",
    model=Payout,
    key_field="payout_id",
    response_schema=PayoutResponse,
    create_schema=PayoutCreate,
    update_schema=PayoutUpdate,
    searchable_fields=("driver", "payout_id"),
    default_page_size=10,
)

PRICING = EntityConfig(
    name="pricing",
    label="pricing rule",
    model=PricingRule,
    key_field="id",
    response_schema=PricingRuleResponse,
    create_schema=PricingRuleCreate,
    update_schema=PricingRuleUpdate,
    searchable_fields=("name", "region"),
    default_page_size=10,
)


ENTITIES: Dict[str, EntityConfig] = {
    entity.name: entity
    for entity in (ORDERS, DRIVERS, VEHICLES, FLEET, PAYOUTS, PRICING)
}


def get_entity(name: str) -> EntityConfig:
    """Look up an entity config by its route name."""
    try:
        return ENTITIES[name]
    except KeyError:
        raise ValueError(f"Unknown entity: {name}")

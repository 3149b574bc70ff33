"""
Pydantic schemas for the orders endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from fleetboard.schemas.common import CamelModel


class OrderResponse(CamelModel):
    """Order as returned to the dashboard; ``id`` mirrors ``orderId``."""
    model_config = ConfigDict(from_attributes=True)
    
    id: str = Field(validation_alias=AliasChoices("order_id", "id"))
    order_id: str
    customer: str
    destination: str
    status: str
    priority: str
    service_type: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class OrderCreate(CamelModel):
    """Request body for POST /orders."""
    order_id: str = Field(..., min_length=1)
    customer: str
    destination: str
    status: str
    priority: str
    service_type: Optional[str] = "Standard Delivery"


class OrderUpdate(CamelModel):
    """Request body for PATCH /orders/{id}. Omitted fields stay unchanged."""
    customer: Optional[str] = None
    destination: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    service_type: Optional[str] = None

"""
Pydantic schemas for pricing rules.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from fleetboard.schemas.common import CamelModel


class PricingRuleResponse(CamelModel):
    """Pricing rule; ``id`` is the internal identifier."""
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    name: str
    type: str
    value: str
    region: str
    status: str
    last_updated: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PricingRuleCreate(CamelModel):
    """Request body for POST /pricing."""
    name: str
    type: str
    value: str
    region: str
    status: str
    last_updated: Optional[str] = None


class PricingRuleUpdate(CamelModel):
    """Request body for PATCH /pricing/{id}."""
    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
    region: Optional[str] = None
    status: Optional[str] = None
    last_updated: Optional[str] = None

"""
Pydantic schemas for the drivers endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from fleetboard.schemas.common import CamelModel


class DriverResponse(CamelModel):
    """Driver as returned to the dashboard; ``id`` mirrors ``driverId``."""
    model_config = ConfigDict(from_attributes=True)
    
    id: str = Field(validation_alias=AliasChoices("driver_id", "id"))
    driver_id: str
    name: str
    status: str
    rating: float
    deliveries: int
    experience: Optional[str] = None
    contact: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DriverCreate(CamelModel):
    """Request body for POST /drivers."""
    driver_id: str = Field(..., min_length=1)
    name: str
    status: str
    rating: float = Field(default=0.0, ge=0, le=5)
    deliveries: int = Field(default=0, ge=0)
    experience: Optional[str] = None
    contact: Optional[str] = None
    avatar: Optional[str] = None


class DriverUpdate(CamelModel):
    """Request body for PATCH /drivers/{id}."""
    name: Optional[str] = None
    status: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    deliveries: Optional[int] = Field(default=None, ge=0)
    experience: Optional[str] = None
    contact: Optional[str] = None
    avatar: Optional[str] = None

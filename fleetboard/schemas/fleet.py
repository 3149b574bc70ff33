"""
Pydantic schemas for the live fleet endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from fleetboard.schemas.common import CamelModel


class FleetItemResponse(CamelModel):
    """Fleet position as returned to the dashboard; ``id`` mirrors ``vehicleId``."""
    model_config = ConfigDict(from_attributes=True)
    
    id: str = Field(validation_alias=AliasChoices("vehicle_id", "id"))
    vehicle_id: str
    status: str
    location: str
    latitude: float
    longitude: float
    driver: Optional[str] = None
    load: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class FleetItemCreate(CamelModel):
    """Request body for POST /fleet."""
    vehicle_id: str = Field(..., min_length=1)
    status: str
    location: str
    latitude: float = Field(default=0.0, ge=-90, le=90)
    longitude: float = Field(default=0.0, ge=-180, le=180)
    driver: Optional[str] = None
    load: Optional[str] = None


class FleetItemUpdate(CamelModel):
    """Request body for PATCH /fleet/{id}."""
    status: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    driver: Optional[str] = None
    load: Optional[str] = None

"""
Pydantic schemas for the vehicles endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from fleetboard.schemas.common import CamelModel


class VehicleResponse(CamelModel):
    """Vehicle as returned to the dashboard; ``id`` mirrors ``vehicleId``."""
    model_config = ConfigDict(from_attributes=True)
    
    id: str = Field(validation_alias=AliasChoices("vehicle_id", "id"))
    vehicle_id: str
    type: str
    model: str
    capacity: Optional[str] = None
    fuel_level: Optional[int] = None
    last_maintenance: Optional[str] = None
    status: str
    vin: Optional[str] = None
    year: Optional[int] = None
    mileage: Optional[str] = None
    engine_status: Optional[str] = None
    tire_pressure: Optional[str] = None
    current_driver: Optional[str] = None
    current_location: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class VehicleCreate(CamelModel):
    """Request body for POST /vehicles."""
    vehicle_id: str = Field(..., min_length=1)
    type: str
    model: str
    status: str
    capacity: Optional[str] = None
    fuel_level: Optional[int] = Field(default=None, ge=0, le=100)
    last_maintenance: Optional[str] = None
    vin: Optional[str] = None
    year: Optional[int] = None
    mileage: Optional[str] = None
    engine_status: Optional[str] = None
    tire_pressure: Optional[str] = None
    current_driver: Optional[str] = None
    current_location: Optional[str] = None


class VehicleUpdate(CamelModel):
    """Request body for PATCH /vehicles/{id}."""
    type: Optional[str] = None
    model: Optional[str] = None
    status: Optional[str] = None
    capacity: Optional[str] = None
    fuel_level: Optional[int] = Field(default=None, ge=0, le=100)
    last_maintenance: Optional[str] = None
    vin: Optional[str] = None
    year: Optional[int] = None
    mileage: Optional[str] = None
    engine_status: Optional[str] = None
    tire_pressure: Optional[str] = None
    current_driver: Optional[str] = None
    current_location: Optional[str] = None

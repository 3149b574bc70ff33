"""
Vehicle model: registered fleet vehicles with maintenance data.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fleetboard.database import Base


class Vehicle(Base):
    """Vehicle record addressed by ``vehicle_id``."""
    __tablename__ = "vehicles"
    
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    vehicle_id: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    capacity: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    fuel_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_maintenance: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    vin: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    mileage: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    engine_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    tire_pressure: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    # Plain names, not foreign keys
    current_driver: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    current_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
    
    def __repr__(self) -> str:
        return f"<Vehicle(vehicle_id={self.vehicle_id}, model={self.model})>"

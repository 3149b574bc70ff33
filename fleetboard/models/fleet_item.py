"""
Live fleet position shown on the fleet map and table.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Float, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fleetboard.database import Base


class FleetItem(Base):
    """Current location and load of a vehicle on the road."""
    __tablename__ = "fleet_items"
    
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
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, default=0.0)
    longitude: Mapped[float] = mapped_column(Float, default=0.0)
    driver: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    load: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    
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
        return f"<FleetItem(vehicle_id={self.vehicle_id}, status={self.status})>"

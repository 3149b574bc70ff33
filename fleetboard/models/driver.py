"""
Driver model representing delivery personnel on the drivers screen.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Float, Integer, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fleetboard.database import Base


class Driver(Base):
    """
    Driver record with rating and delivery counters.
    Vehicles and fleet items refer to drivers by name only, there is no join.
    """
    __tablename__ = "drivers"
    
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    driver_id: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    rating: Mapped[float] = mapped_column(Float, default=0.0)
    deliveries: Mapped[int] = mapped_column(Integer, default=0)
    experience: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    contact: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    avatar: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    
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
        return f"<Driver(driver_id={self.driver_id}, name={self.name})>"

"""
Read-only report tables backing the analytics screen and stat tiles.
Populated by the seeder, never written through the API. ``position`` keeps
the display order of the seed asset.
"""

import uuid

from sqlalchemy import String, Float, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fleetboard.database import Base


class Stat(Base):
    """Dashboard statistic tile (label, value and trend vs last period)."""
    __tablename__ = "stats"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str] = mapped_column(String(50), nullable=False)
    change: Mapped[str] = mapped_column(String(50), nullable=False)
    trend: Mapped[str] = mapped_column(String(20), nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0)


class MonthlyPerformance(Base):
    """Revenue and delivery totals per month."""
    __tablename__ = "monthly_performance"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    month: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    revenue: Mapped[float] = mapped_column(Float, default=0.0)
    deliveries: Mapped[int] = mapped_column(Integer, default=0)
    position: Mapped[int] = mapped_column(Integer, default=0)


class StatusDistribution(Base):
    """Number of orders per status."""
    __tablename__ = "status_distribution"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    status: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    count: Mapped[int] = mapped_column(Integer, default=0)

"""
Payout model for driver wallet withdrawals and top-ups.
Amounts are stored as display strings (e.g. "$1,250.00").
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fleetboard.database import Base


class Payout(Base):
    """A payout or top-up request addressed by ``payout_id``."""
    __tablename__ = "payouts"
    
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    payout_id: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    driver: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    request_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bank: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    account_end: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    payout_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    wallet_total_balance: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    wallet_available_balance: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    
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
        return f"<Payout(payout_id={self.payout_id}, amount={self.amount})>"

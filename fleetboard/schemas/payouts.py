"""
Pydantic schemas for payouts (also served as top-ups).
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from fleetboard.schemas.common import CamelModel


class PayoutResponse(CamelModel):
    """Payout as returned to the dashboard; ``id`` mirrors ``payoutId``."""
    model_config = ConfigDict(from_attributes=True)
    
    id: str = Field(validation_alias=AliasChoices("payout_id", "id"))
    payout_id: str
    driver: str
    amount: str
    status: str
    request_date: Optional[str] = None
    bank: Optional[str] = None
    account_end: Optional[str] = None
    payout_type: Optional[str] = None
    wallet_total_balance: Optional[str] = None
    wallet_available_balance: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PayoutCreate(CamelModel):
    """Request body for POST /payouts."""
    payout_id: str = Field(..., min_length=1)
    driver: str
    amount: str
    status: str
    request_date: Optional[str] = None
    bank: Optional[str] = None
    account_end: Optional[str] = None
    payout_type: Optional[str] = None
    wallet_total_balance: Optional[str] = None
    wallet_available_balance: Optional[str] = None


class PayoutUpdate(CamelModel):
    """Request body for PATCH /payouts/{id}."""
    driver: Optional[str] = None
    amount: Optional[str] = None
    status: Optional[str] = None
    request_date: Optional[str] = None
    bank: Optional[str] = None
    account_end: Optional[str] = None
    payout_type: Optional[str] = None
    wallet_total_balance: Optional[str] = None
    wallet_available_balance: Optional[str] = None

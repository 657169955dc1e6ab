"""
Bank Pydantic schemas.
"""

from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal


class BankResponse(BaseModel):
    """Schema for bank response, balance included."""
    id: str
    name: str
    email: str
    created_at: datetime
    balance: Decimal = Decimal("0")

    class Config:
        from_attributes = True


class BankList(BaseModel):
    items: list[BankResponse]
    total: int
    total_balance: Decimal


class OwnerBalances(BaseModel):
    """Banks of one owner with the sum of their balances."""
    email: str
    banks: list[BankResponse]
    total_balance: Decimal

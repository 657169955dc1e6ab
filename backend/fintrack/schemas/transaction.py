"""
Transaction schemas.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from fintrack.models.transaction import TransactionKind


class TransactionCreate(BaseModel):
    date: date
    description: str = Field("", max_length=1000)
    kind: TransactionKind
    amount: Decimal = Field(..., ge=0)
    source_id: Optional[str] = None
    destination_id: Optional[str] = None
    bank_id: Optional[str] = None


class TransactionResponse(BaseModel):
    id: str
    date: date
    description: str
    kind: TransactionKind
    amount: Decimal
    source_id: Optional[str]
    destination_id: Optional[str]
    bank_id: Optional[str]
    is_bank: bool
    created_at: datetime

    class Config:
        from_attributes = True


class TableRecord(BaseModel):
    """
    One table row, validated once when data leaves the database.

    `no` is the display position after ordering by date, newest first.
    Source and destination are carried by name.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    no: int = Field(..., ge=1)
    date: date
    description: str
    kind: TransactionKind
    source: Optional[str] = None
    destination: Optional[str] = None
    amount: Decimal = Field(..., ge=0)
    is_bank: bool = False


class TransactionListResponse(BaseModel):
    items: list[TableRecord]
    total: int

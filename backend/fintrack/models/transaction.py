"""
Transaction database model.
"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import (
    Column, String, Boolean, DateTime, Date, Enum, Numeric, Text, ForeignKey, Index, CheckConstraint
)
from sqlalchemy.orm import relationship
from fintrack.database import Base


class TransactionKind(str, enum.Enum):
    """Transaction kind (jenis)."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    kind = Column(Enum(TransactionKind), nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)  # Always non-negative, sign comes from kind
    source_id = Column(String(36), ForeignKey("sources.id"), nullable=True)
    destination_id = Column(String(36), ForeignKey("destinations.id"), nullable=True)
    bank_id = Column(String(36), ForeignKey("banks.id"), nullable=True)
    is_bank = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    source = relationship("Source", back_populates="transactions")
    destination = relationship("Destination", back_populates="transactions")
    bank = relationship("Bank", back_populates="transactions")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),
        Index("idx_transaction_email_date", "email", "date"),
        Index("idx_transaction_bank", "bank_id"),
    )

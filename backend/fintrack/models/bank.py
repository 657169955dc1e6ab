"""
Bank database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.orm import relationship
from fintrack.database import Base


class Bank(Base):
    """Bank account. Its balance is derived from transactions and never stored."""

    __tablename__ = "banks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="bank")

    __table_args__ = (
        Index("idx_bank_email", "email"),
    )

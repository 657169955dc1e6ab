"""
Database models package.
"""

from fintrack.models.source import Source
from fintrack.models.destination import Destination
from fintrack.models.bank import Bank
from fintrack.models.transaction import Transaction, TransactionKind

__all__ = [
    "Source",
    "Destination",
    "Bank",
    "Transaction",
    "TransactionKind",
]

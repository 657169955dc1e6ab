"""
Bank API endpoints.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fintrack.dependencies import get_admin_email, get_current_email, get_db
from fintrack.schemas.bank import BankList, BankResponse, OwnerBalances
from fintrack.schemas.record import NamedRecordCreate
from fintrack.services import record_service
from fintrack.services.balance_service import attach_balances, group_by_owner

router = APIRouter(prefix="/banks", tags=["banks"])


@router.get("", response_model=BankList)
def list_banks(
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """List the user's banks with their balances."""
    banks = record_service.bank_balances(db, email)
    return BankList(
        items=banks,
        total=len(banks),
        total_balance=sum((b.balance for b in banks), Decimal("0"))
    )


@router.get("/by-owner", response_model=list[OwnerBalances])
def list_banks_by_owner(
    db: Session = Depends(get_db),
    admin_email: str = Depends(get_admin_email)
):
    """Every bank of every user, grouped per owner with the owner's total. Admins only."""
    return group_by_owner(record_service.bank_balances(db))


@router.post("", response_model=BankResponse, status_code=201)
def create_bank(
    bank: NamedRecordCreate,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_email)
):
    """Create a bank. A new bank starts with a zero balance."""
    db_bank = record_service.create_bank(db, email, bank.name)
    return attach_balances([db_bank], [])[0]

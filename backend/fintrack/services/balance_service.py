"""
Balance aggregation for banks and owners.

Amounts are stored non-negative; the sign comes from the transaction kind.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, List

from fintrack.models.transaction import TransactionKind
from fintrack.schemas.bank import BankResponse, OwnerBalances


def signed_amount(kind: TransactionKind, amount: Decimal) -> Decimal:
    """+amount for income, -amount for expense."""
    if kind == TransactionKind.INCOME:
        return Decimal(amount)
    return -Decimal(amount)


def bank_balance(transactions: Iterable[Any]) -> Decimal:
    """
    Net balance of a list of transactions.

    Accepts anything with `kind` and `amount` attributes (ORM rows or
    table records). An empty list gives zero.
    """
    return sum((signed_amount(t.kind, t.amount) for t in transactions), Decimal("0"))


def net_total(records: Iterable[Any]) -> Decimal:
    """Total saldo of the rows currently shown in a table."""
    return bank_balance(records)


def attach_balances(banks: Iterable[Any], transactions: Iterable[Any]) -> List[BankResponse]:
    """Pair every bank with the balance of the transactions booked on it."""
    by_bank: Dict[str, List[Any]] = {}
    for t in transactions:
        if t.bank_id is not None:
            by_bank.setdefault(t.bank_id, []).append(t)

    return [
        BankResponse(
            id=bank.id,
            name=bank.name,
            email=bank.email,
            created_at=bank.created_at,
            balance=bank_balance(by_bank.get(bank.id, [])),
        )
        for bank in banks
    ]


def group_by_owner(bank_balances: Iterable[BankResponse]) -> List[OwnerBalances]:
    """
    Group banks by owner email, in first-seen order.

    `total_balance` is the sum over that owner's banks only.
    """
    grouped: Dict[str, List[BankResponse]] = {}
    for bank in bank_balances:
        grouped.setdefault(bank.email, []).append(bank)

    return [
        OwnerBalances(
            email=email,
            banks=banks,
            total_balance=sum((b.balance for b in banks), Decimal("0")),
        )
        for email, banks in grouped.items()
    ]

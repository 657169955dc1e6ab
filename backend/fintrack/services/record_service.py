"""
Persistence for sources, destinations, banks and transactions.

Everything is scoped to the owner's email.
"""

import logging
from typing import Iterable, List, Optional, Type, Union

from sqlalchemy.orm import Session, joinedload

from fintrack.models import Bank, Destination, Source, Transaction
from fintrack.schemas.bank import BankResponse
from fintrack.schemas.transaction import TableRecord, TransactionCreate
from fintrack.services.balance_service import attach_balances

logger = logging.getLogger(__name__)

NamedModel = Union[Type[Source], Type[Destination], Type[Bank]]


class DuplicateNameError(ValueError):
    """A source or destination with this name already exists for the owner."""


class RecordNotFoundError(ValueError):
    """A referenced record does not exist or belongs to someone else."""


def name_taken(existing_names: Iterable[str], name: str) -> bool:
    """Case-insensitive name lookup, including non-ASCII letters."""
    wanted = name.strip().casefold()
    return any(existing.strip().casefold() == wanted for existing in existing_names)


def _list_named(db: Session, model: NamedModel, email: str) -> list:
    return db.query(model).filter(model.email == email).order_by(model.created_at, model.name).all()


def list_sources(db: Session, email: str) -> List[Source]:
    return _list_named(db, Source, email)


def list_destinations(db: Session, email: str) -> List[Destination]:
    return _list_named(db, Destination, email)


def list_banks(db: Session, email: str) -> List[Bank]:
    return _list_named(db, Bank, email)


def _create_unique(db: Session, model: NamedModel, email: str, name: str):
    name = name.strip()
    # Compared in Python: SQLite lower() only folds ASCII letters
    existing_names = [row.name for row in db.query(model.name).filter(model.email == email)]
    if name_taken(existing_names, name):
        logger.warning(f"Rejected duplicate {model.__tablename__} name {name!r} for {email}")
        raise DuplicateNameError(f"{name} already exists")

    record = model(name=name, email=email)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"Created {model.__tablename__} {record.id} for {email}")
    return record


def create_source(db: Session, email: str, name: str) -> Source:
    return _create_unique(db, Source, email, name)


def create_destination(db: Session, email: str, name: str) -> Destination:
    return _create_unique(db, Destination, email, name)


def create_bank(db: Session, email: str, name: str) -> Bank:
    """Bank names are not checked for duplicates."""
    bank = Bank(name=name.strip(), email=email)
    db.add(bank)
    db.commit()
    db.refresh(bank)
    logger.info(f"Created bank {bank.id} for {email}")
    return bank


def _owned(db: Session, model: NamedModel, record_id: Optional[str], email: str) -> None:
    if record_id is None:
        return
    found = db.query(model).filter(model.id == record_id, model.email == email).first()
    if not found:
        raise RecordNotFoundError(f"{model.__name__} {record_id} not found")


def create_transaction(db: Session, email: str, data: TransactionCreate) -> Transaction:
    """Book a transaction. Referenced source, destination and bank must be the owner's."""
    _owned(db, Source, data.source_id, email)
    _owned(db, Destination, data.destination_id, email)
    _owned(db, Bank, data.bank_id, email)

    transaction = Transaction(
        email=email,
        date=data.date,
        description=data.description,
        kind=data.kind,
        amount=data.amount,
        source_id=data.source_id,
        destination_id=data.destination_id,
        bank_id=data.bank_id,
        is_bank=data.bank_id is not None,
    )
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.info(f"Created transaction {transaction.id} for {email}")
    return transaction


def list_transactions(db: Session, email: str) -> List[Transaction]:
    """Owner's transactions, newest first, with source and destination loaded."""
    return db.query(Transaction).options(
        joinedload(Transaction.source),
        joinedload(Transaction.destination),
    ).filter(
        Transaction.email == email
    ).order_by(
        Transaction.date.desc(),
        Transaction.created_at.desc()
    ).all()


def to_table_records(transactions: Iterable[Transaction]) -> List[TableRecord]:
    """Validate ORM rows into table records, numbering them in the given order."""
    return [
        TableRecord(
            id=t.id,
            no=index,
            date=t.date,
            description=t.description or "",
            kind=t.kind,
            source=t.source.name if t.source else None,
            destination=t.destination.name if t.destination else None,
            amount=t.amount,
            is_bank=bool(t.is_bank),
        )
        for index, t in enumerate(transactions, start=1)
    ]


def table_records(db: Session, email: str) -> List[TableRecord]:
    return to_table_records(list_transactions(db, email))


def bank_balances(db: Session, email: Optional[str] = None) -> List[BankResponse]:
    """Banks with their balances, for one owner or, without an email, for everyone."""
    banks_query = db.query(Bank)
    transactions_query = db.query(Transaction).filter(Transaction.bank_id.isnot(None))
    if email is not None:
        banks_query = banks_query.filter(Bank.email == email)
        transactions_query = transactions_query.filter(Transaction.email == email)

    banks = banks_query.order_by(Bank.email, Bank.created_at, Bank.name).all()
    return attach_balances(banks, transactions_query.all())

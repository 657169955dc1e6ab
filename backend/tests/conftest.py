"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from fintrack.config import settings
from fintrack.database import Base
from fintrack.dependencies import get_db
from fintrack.main import app
from fintrack.models import Bank, Destination, Source, Transaction, TransactionKind
from fintrack.schemas.transaction import TableRecord

# Tables come from the in-memory engine below, not from the app's startup hook
settings.create_tables_on_startup = False

USER_EMAIL = "budi@example.com"
OTHER_EMAIL = "sari@example.com"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client signed in as USER_EMAIL."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        test_client.headers.update({settings.user_email_header: USER_EMAIL})
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_source(db_session):
    """Create a sample source."""
    source = Source(id=str(uuid.uuid4()), name="Gaji", email=USER_EMAIL)
    db_session.add(source)
    db_session.commit()
    db_session.refresh(source)
    return source


@pytest.fixture
def sample_destination(db_session):
    """Create a sample destination."""
    destination = Destination(id=str(uuid.uuid4()), name="Makan", email=USER_EMAIL)
    db_session.add(destination)
    db_session.commit()
    db_session.refresh(destination)
    return destination


@pytest.fixture
def sample_bank(db_session):
    """Create a sample bank."""
    bank = Bank(id=str(uuid.uuid4()), name="BCA", email=USER_EMAIL)
    db_session.add(bank)
    db_session.commit()
    db_session.refresh(bank)
    return bank


@pytest.fixture
def sample_transactions(db_session, sample_source, sample_destination, sample_bank):
    """Three transactions on the sample bank: +100, -50, +25."""
    rows = [
        (date(2024, 1, 1), "Gaji Januari", TransactionKind.INCOME, Decimal("100.00"), sample_source.id, None),
        (date(2024, 1, 2), "Makan siang", TransactionKind.EXPENSE, Decimal("50.00"), None, sample_destination.id),
        (date(2024, 1, 3), "Bonus", TransactionKind.INCOME, Decimal("25.00"), sample_source.id, None),
    ]
    transactions = []
    for txn_date, description, kind, amount, source_id, destination_id in rows:
        txn = Transaction(
            id=str(uuid.uuid4()),
            email=USER_EMAIL,
            date=txn_date,
            description=description,
            kind=kind,
            amount=amount,
            source_id=source_id,
            destination_id=destination_id,
            bank_id=sample_bank.id,
            is_bank=True,
        )
        db_session.add(txn)
        transactions.append(txn)
    db_session.commit()
    for txn in transactions:
        db_session.refresh(txn)
    return transactions


@pytest.fixture
def make_record():
    """Factory for table records; `no` counts up unless given."""
    counter = {"no": 0}

    def factory(**overrides):
        counter["no"] += 1
        values = {
            "id": str(uuid.uuid4()),
            "no": counter["no"],
            "date": date(2024, 1, 1),
            "description": "Belanja",
            "kind": TransactionKind.EXPENSE,
            "source": None,
            "destination": None,
            "amount": Decimal("10"),
            "is_bank": False,
        }
        values.update(overrides)
        return TableRecord(**values)

    return factory

"""Shared fixtures backed by an in-memory SQLite ledger."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, insert, select
from sqlalchemy.pool import StaticPool

from src.infrastructure.db import StaticEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerStore
from src.infrastructure.tables import (
    accounts,
    create_schema,
    transactions,
    users,
)

OWNER = "auth|alice"
OTHER_OWNER = "auth|bob"


@pytest.fixture
def ledger_engine():
    """SQLite engine seeded with two users, three accounts, two rows."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    create_schema(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(users),
            [
                {"id": "user-1", "auth_user_id": OWNER},
                {"id": "user-2", "auth_user_id": OTHER_OWNER},
            ],
        )
        conn.execute(
            insert(accounts),
            [
                {
                    "id": "acc-checking",
                    "user_id": "user-1",
                    "name": "Checking",
                    "type": "CURRENT",
                    "balance": Decimal("100.00"),
                    "is_default": True,
                },
                {
                    "id": "acc-savings",
                    "user_id": "user-1",
                    "name": "Savings",
                    "type": "SAVINGS",
                    "balance": Decimal("0.00"),
                    "is_default": False,
                },
                {
                    "id": "acc-other",
                    "user_id": "user-2",
                    "name": "Other",
                    "type": "CURRENT",
                    "balance": Decimal("50.00"),
                    "is_default": True,
                },
            ],
        )
        conn.execute(
            insert(transactions),
            [
                {
                    "id": "tx-opening",
                    "user_id": "user-1",
                    "account_id": "acc-checking",
                    "type": "INCOME",
                    "amount": Decimal("100.00"),
                    "date": date(2024, 1, 1),
                    "category": "salary",
                    "is_recurring": False,
                },
                {
                    "id": "tx-other",
                    "user_id": "user-2",
                    "account_id": "acc-other",
                    "type": "INCOME",
                    "amount": Decimal("50.00"),
                    "date": date(2024, 1, 1),
                    "category": "salary",
                    "is_recurring": False,
                },
            ],
        )
    yield engine
    engine.dispose()


@pytest.fixture
def ledger_store(ledger_engine):
    """SQLAlchemy ledger store over the seeded engine."""
    return SqlAlchemyLedgerStore(
        StaticEngineAdapter(ledger_engine),
        logger=MagicMock(),
    )


@pytest.fixture
def read_balance(ledger_engine):
    """Return a function reading an account balance as Decimal."""

    def _read(account_id: str) -> Decimal:
        with ledger_engine.connect() as conn:
            value = conn.execute(
                select(accounts.c.balance).where(accounts.c.id == account_id)
            ).scalar_one()
        return Decimal(str(value)).quantize(Decimal("0.01"))

    return _read


@pytest.fixture
def count_transactions(ledger_engine):
    """Return a function counting transaction rows."""

    def _count() -> int:
        with ledger_engine.connect() as conn:
            return len(conn.execute(select(transactions.c.id)).all())

    return _count

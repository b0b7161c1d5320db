"""SQLAlchemy table metadata for the ledger store."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("auth_user_id", String(255), nullable=False, unique=True),
    Column("email", String(255)),
    Column("name", String(255)),
    Column("created_at", DateTime, server_default=func.now()),
)

accounts = Table(
    "accounts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "user_id",
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column("type", String(16), nullable=False),
    Column("balance", Numeric(14, 2), nullable=False, default=0),
    Column("is_default", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, server_default=func.now()),
    Index("ix_accounts_user_id", "user_id"),
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "user_id",
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "account_id",
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(16), nullable=False),
    Column("amount", Numeric(14, 2), nullable=False),
    Column("date", Date, nullable=False),
    Column("description", Text),
    Column("category", String(64), nullable=False),
    Column("is_recurring", Boolean, nullable=False, default=False),
    Column("recurring_interval", String(16)),
    Column("next_recurring_date", Date),
    Column("created_at", DateTime, server_default=func.now()),
    Index("ix_transactions_user_id", "user_id"),
    Index("ix_transactions_account_id", "account_id"),
)


def create_schema(engine: Engine) -> None:
    """Create every ledger table that does not exist yet."""
    metadata.create_all(engine)


__all__ = ["metadata", "users", "accounts", "transactions", "create_schema"]

"""SQLAlchemy-backed store for accounts and transactions.

Each unit of work wraps one ``engine.begin()`` block: every statement issued
through the unit commits together or is rolled back together. Balances are
only ever changed with ``balance = balance + :delta`` statements so the
database applies increments atomically.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
import uuid

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import (
    LedgerStorePort,
    LedgerUnitOfWork,
)
from src.domain.errors import NotFound, StoreFailure
from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction, TransactionPayload
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.tables import accounts, transactions, users
from src.utils.decimal_utils import quantize_money

SNAPSHOT_ISOLATION_LEVEL = "REPEATABLE READ"


class SqlAlchemyLedgerUnit(LedgerUnitOfWork):
    """Ledger operations bound to one open database transaction."""

    def __init__(self, conn: Connection) -> None:
        """Initialize the unit.

        Args:
            conn: Connection with an active transaction.
        """
        self._conn = conn

    def resolve_user_id(self, auth_user_id: str) -> str | None:
        row = self._conn.execute(
            select(users.c.id).where(users.c.auth_user_id == auth_user_id)
        ).first()
        return row.id if row else None

    def get_account(self, account_id: str, user_id: str) -> Account | None:
        row = self._conn.execute(
            select(accounts).where(
                accounts.c.id == account_id,
                accounts.c.user_id == user_id,
            )
        ).first()
        return self._to_account(row) if row else None

    def list_accounts(self, user_id: str | None = None) -> list[Account]:
        query = select(accounts).order_by(accounts.c.name, accounts.c.id)
        if user_id is not None:
            query = query.where(accounts.c.user_id == user_id)
        rows = self._conn.execute(query).all()
        return [self._to_account(row) for row in rows]

    def count_transactions_by_account(self, user_id: str) -> dict[str, int]:
        query = (
            select(
                transactions.c.account_id,
                func.count().label("transaction_count"),
            )
            .where(transactions.c.user_id == user_id)
            .group_by(transactions.c.account_id)
        )
        rows = self._conn.execute(query).all()
        return {row.account_id: int(row.transaction_count) for row in rows}

    def get_transaction(
        self,
        transaction_id: str,
        user_id: str,
        for_update: bool = False,
    ) -> Transaction | None:
        query = select(transactions).where(
            transactions.c.id == transaction_id,
            transactions.c.user_id == user_id,
        )
        if for_update:
            query = query.with_for_update()
        row = self._conn.execute(query).first()
        return self._to_transaction(row) if row else None

    def find_transactions(
        self,
        transaction_ids: list[str],
        user_id: str,
        for_update: bool = False,
    ) -> list[Transaction]:
        if not transaction_ids:
            return []
        query = (
            select(transactions)
            .where(
                transactions.c.id.in_(transaction_ids),
                transactions.c.user_id == user_id,
            )
            .order_by(transactions.c.id)
        )
        if for_update:
            query = query.with_for_update()
        rows = self._conn.execute(query).all()
        return [self._to_transaction(row) for row in rows]

    def list_account_transactions(self, account_id: str) -> list[Transaction]:
        query = (
            select(transactions)
            .where(transactions.c.account_id == account_id)
            .order_by(transactions.c.date.desc(), transactions.c.id)
        )
        rows = self._conn.execute(query).all()
        return [self._to_transaction(row) for row in rows]

    def list_transactions(
        self,
        user_id: str | None = None,
    ) -> list[Transaction]:
        query = select(transactions).order_by(
            transactions.c.date.desc(),
            transactions.c.id,
        )
        if user_id is not None:
            query = query.where(transactions.c.user_id == user_id)
        rows = self._conn.execute(query).all()
        return [self._to_transaction(row) for row in rows]

    def insert_transaction(
        self,
        user_id: str,
        payload: TransactionPayload,
        next_recurring_date: date | None,
    ) -> Transaction:
        transaction_id = str(uuid.uuid4())
        values = self._row_values(payload, next_recurring_date)
        self._conn.execute(
            insert(transactions).values(
                id=transaction_id,
                user_id=user_id,
                **values,
            )
        )
        return self._reload_transaction(transaction_id, user_id)

    def update_transaction(
        self,
        transaction_id: str,
        user_id: str,
        payload: TransactionPayload,
        next_recurring_date: date | None,
    ) -> Transaction:
        result = self._conn.execute(
            update(transactions)
            .where(
                transactions.c.id == transaction_id,
                transactions.c.user_id == user_id,
            )
            .values(**self._row_values(payload, next_recurring_date))
        )
        if result.rowcount == 0:
            raise NotFound("transaction", transaction_id)
        return self._reload_transaction(transaction_id, user_id)

    def delete_transactions(
        self,
        transaction_ids: list[str],
        user_id: str,
    ) -> int:
        if not transaction_ids:
            return 0
        result = self._conn.execute(
            delete(transactions).where(
                transactions.c.id.in_(transaction_ids),
                transactions.c.user_id == user_id,
            )
        )
        return result.rowcount

    def adjust_balance(
        self,
        account_id: str,
        user_id: str,
        delta: Decimal,
    ) -> None:
        result = self._conn.execute(
            update(accounts)
            .where(
                accounts.c.id == account_id,
                accounts.c.user_id == user_id,
            )
            .values(balance=accounts.c.balance + delta)
        )
        if result.rowcount == 0:
            raise NotFound("account", account_id)

    def clear_default_account(self, user_id: str) -> None:
        self._conn.execute(
            update(accounts)
            .where(
                accounts.c.user_id == user_id,
                accounts.c.is_default.is_(True),
            )
            .values(is_default=False)
        )

    def set_default_account(
        self,
        account_id: str,
        user_id: str,
    ) -> Account | None:
        result = self._conn.execute(
            update(accounts)
            .where(
                accounts.c.id == account_id,
                accounts.c.user_id == user_id,
            )
            .values(is_default=True)
        )
        if result.rowcount == 0:
            return None
        return self.get_account(account_id, user_id)

    def _reload_transaction(
        self,
        transaction_id: str,
        user_id: str,
    ) -> Transaction:
        transaction = self.get_transaction(transaction_id, user_id)
        if transaction is None:
            raise NotFound("transaction", transaction_id)
        return transaction

    @staticmethod
    def _row_values(
        payload: TransactionPayload,
        next_recurring_date: date | None,
    ) -> dict:
        return {
            "account_id": payload.account_id,
            "type": payload.type,
            "amount": payload.amount,
            "date": payload.date,
            "description": payload.description,
            "category": payload.category,
            "is_recurring": payload.is_recurring,
            "recurring_interval": payload.recurring_interval,
            "next_recurring_date": next_recurring_date,
        }

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            account_type=row.type,
            balance=quantize_money(row.balance),
            is_default=bool(row.is_default),
        )

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=row.id,
            user_id=row.user_id,
            account_id=row.account_id,
            type=row.type,
            amount=quantize_money(row.amount),
            date=row.date,
            category=row.category,
            description=row.description,
            is_recurring=bool(row.is_recurring),
            recurring_interval=row.recurring_interval,
            next_recurring_date=row.next_recurring_date,
        )


@contextmanager
def _begin(engine: Engine, snapshot: bool) -> Iterator[Connection]:
    if not snapshot or engine.dialect.name == "sqlite":
        with engine.begin() as conn:
            yield conn
        return
    with engine.connect() as conn:
        conn.execution_options(isolation_level=SNAPSHOT_ISOLATION_LEVEL)
        with conn.begin():
            yield conn


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store opening one database transaction per unit of work."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    @contextmanager
    def unit_of_work(
        self,
        snapshot: bool = False,
    ) -> Iterator[SqlAlchemyLedgerUnit]:
        """Yield a unit that commits on success and rolls back on error.

        Args:
            snapshot: Run the unit at REPEATABLE READ so that consecutive
                reads observe one committed state. SQLite transactions
                already behave this way.

        Raises:
            StoreFailure: If the database rejects a statement or the commit.
        """
        engine = self._db_port.get_ledger_engine()
        try:
            with _begin(engine, snapshot) as conn:
                yield SqlAlchemyLedgerUnit(conn)
        except SQLAlchemyError as exc:
            self._logger.error(f"Ledger unit of work rolled back: {exc}")
            raise StoreFailure(f"Ledger store failure: {exc}") from exc


__all__ = ["SqlAlchemyLedgerStore", "SqlAlchemyLedgerUnit"]

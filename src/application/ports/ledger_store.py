"""Ports for the transactional ledger store."""

from contextlib import AbstractContextManager
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction, TransactionPayload


class LedgerUnitOfWork(Protocol):
    """Operations available inside one all-or-nothing store transaction."""

    def resolve_user_id(self, auth_user_id: str) -> str | None:
        """Return the internal user id for an identity-provider subject."""

    def get_account(self, account_id: str, user_id: str) -> Account | None:
        """Return an account owned by the user, or None."""

    def list_accounts(self, user_id: str | None = None) -> list[Account]:
        """Return the user's accounts (every account when user_id is None)."""

    def count_transactions_by_account(
        self,
        user_id: str,
    ) -> dict[str, int]:
        """Return the number of transactions per account of the user."""

    def get_transaction(
        self,
        transaction_id: str,
        user_id: str,
        for_update: bool = False,
    ) -> Transaction | None:
        """Return a transaction owned by the user, or None."""

    def find_transactions(
        self,
        transaction_ids: list[str],
        user_id: str,
        for_update: bool = False,
    ) -> list[Transaction]:
        """Return the subset of the ids that exist and belong to the user."""

    def list_account_transactions(self, account_id: str) -> list[Transaction]:
        """Return an account's transactions ordered by date descending."""

    def list_transactions(self, user_id: str | None = None) -> list[Transaction]:
        """Return the user's transactions (all when user_id is None)."""

    def insert_transaction(
        self,
        user_id: str,
        payload: TransactionPayload,
        next_recurring_date: date | None,
    ) -> Transaction:
        """Insert a transaction row and return it."""

    def update_transaction(
        self,
        transaction_id: str,
        user_id: str,
        payload: TransactionPayload,
        next_recurring_date: date | None,
    ) -> Transaction:
        """Overwrite a transaction row and return the stored values."""

    def delete_transactions(self, transaction_ids: list[str], user_id: str) -> int:
        """Delete the user's transactions and return the deleted count."""

    def adjust_balance(
        self,
        account_id: str,
        user_id: str,
        delta: Decimal,
    ) -> None:
        """Atomically increment an account balance by ``delta``."""

    def clear_default_account(self, user_id: str) -> None:
        """Unset the default flag on every account of the user."""

    def set_default_account(
        self,
        account_id: str,
        user_id: str,
    ) -> Account | None:
        """Mark an account as default and return it, or None if missing."""


class LedgerStorePort(Protocol):
    """Port opening atomic units of work against the ledger store."""

    def unit_of_work(
        self,
        snapshot: bool = False,
    ) -> AbstractContextManager[LedgerUnitOfWork]:
        """Open a unit that commits on exit and rolls back on error.

        With ``snapshot`` every read inside the unit sees the same committed
        state.
        """


__all__ = ["LedgerUnitOfWork", "LedgerStorePort"]

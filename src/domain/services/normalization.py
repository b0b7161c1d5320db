"""Conversion of domain records to transport-friendly dictionaries.

Money stays Decimal inside the ledger; these helpers are the only place
where amounts become plain numbers and dates become ISO strings.
"""

from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.models.accounts import (
    Account,
    AccountSummary,
    AccountWithTransactions,
)
from src.domain.models.transactions import Transaction


def normalize_amount(value: Decimal | None) -> float | None:
    """Convert a stored Decimal to a transport number.

    Args:
        value: Exact decimal value from the store.

    Returns:
        float | None: Number with the same decimal digits when printed.
    """
    if value is None:
        return None
    return float(value)


def normalize_date(value: date | None) -> str | None:
    """Return an ISO date string or None."""
    if value is None:
        return None
    return value.isoformat()


def serialize_transaction(transaction: Transaction) -> dict[str, Any]:
    """Return a transaction as a plain dictionary."""
    return {
        "id": transaction.id,
        "user_id": transaction.user_id,
        "account_id": transaction.account_id,
        "type": transaction.type,
        "amount": normalize_amount(transaction.amount),
        "date": normalize_date(transaction.date),
        "category": transaction.category,
        "description": transaction.description,
        "is_recurring": transaction.is_recurring,
        "recurring_interval": transaction.recurring_interval,
        "next_recurring_date": normalize_date(
            transaction.next_recurring_date
        ),
    }


def serialize_account(account: Account) -> dict[str, Any]:
    """Return an account as a plain dictionary."""
    return {
        "id": account.id,
        "user_id": account.user_id,
        "name": account.name,
        "type": account.account_type,
        "balance": normalize_amount(account.balance),
        "is_default": account.is_default,
    }


def serialize_account_summary(summary: AccountSummary) -> dict[str, Any]:
    """Return an account with its transaction count."""
    payload = serialize_account(summary.account)
    payload["transaction_count"] = summary.transaction_count
    return payload


def serialize_account_with_transactions(
    view: AccountWithTransactions,
) -> dict[str, Any]:
    """Return an account, its ordered transactions and their count."""
    payload = serialize_account(view.account)
    payload["transactions"] = [
        serialize_transaction(transaction)
        for transaction in view.transactions
    ]
    payload["transaction_count"] = view.transaction_count
    return payload


__all__ = [
    "normalize_amount",
    "normalize_date",
    "serialize_transaction",
    "serialize_account",
    "serialize_account_summary",
    "serialize_account_with_transactions",
]

"""Tests for balance reconciliation."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Account, Transaction
from src.domain.services.reconciliation import find_balance_discrepancies


def _account(account_id: str, balance: str) -> Account:
    return Account(
        id=account_id,
        user_id="user-1",
        name=account_id.title(),
        account_type="CURRENT",
        balance=Decimal(balance),
    )


def _transaction(account_id: str, transaction_type: str, amount: str):
    return Transaction(
        id=f"{account_id}-{transaction_type}-{amount}",
        user_id="user-1",
        account_id=account_id,
        type=transaction_type,
        amount=Decimal(amount),
        date=date(2024, 1, 1),
        category="other",
    )


def test_find_balance_discrepancies_reports_only_mismatches() -> None:
    """Consistent accounts are skipped and mismatches are logged."""
    logger = MagicMock()
    accounts = [
        _account("ok", "70.00"),
        _account("empty", "0"),
        _account("broken", "15.00"),
    ]
    transactions = [
        _transaction("ok", "INCOME", "100.00"),
        _transaction("ok", "EXPENSE", "30.00"),
        _transaction("broken", "EXPENSE", "5.00"),
    ]

    result = find_balance_discrepancies(accounts, transactions, logger)

    assert len(result) == 1
    assert result[0].account_id == "broken"
    assert result[0].computed_balance == Decimal("-5.00")
    assert result[0].difference == Decimal("20.00")
    logger.warning.assert_called_once()

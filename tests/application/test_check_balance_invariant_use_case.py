"""Tests for the CheckBalanceInvariantUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import update

from src.application.use_cases.check_balance_invariant import (
    CheckBalanceInvariantUseCase,
)
from src.domain.errors import NotFound
from src.infrastructure.tables import accounts


def test_execute_reports_consistent_seed(ledger_store) -> None:
    report = CheckBalanceInvariantUseCase(
        ledger_store,
        logger=MagicMock(),
    ).execute()

    assert report.checked_count == 3
    assert report.is_consistent is True


def test_execute_detects_directly_mutated_balance(
    ledger_engine,
    ledger_store,
) -> None:
    """A balance written outside the ledger shows up as a discrepancy."""
    with ledger_engine.begin() as conn:
        conn.execute(
            update(accounts)
            .where(accounts.c.id == "acc-savings")
            .values(balance=Decimal("5.00"))
        )
    logger = MagicMock()

    report = CheckBalanceInvariantUseCase(
        ledger_store,
        logger=logger,
    ).execute("auth|alice")

    assert report.checked_count == 2
    assert [item.account_id for item in report.discrepancies] == [
        "acc-savings"
    ]
    assert report.discrepancies[0].difference == Decimal("5.00")
    logger.warning.assert_called_once()


def test_execute_rejects_unknown_owner(ledger_store) -> None:
    with pytest.raises(NotFound):
        CheckBalanceInvariantUseCase(
            ledger_store,
            logger=MagicMock(),
        ).execute("auth|ghost")


def test_execute_reads_from_one_snapshot() -> None:
    """Accounts and transactions are read inside one snapshot unit."""
    unit = MagicMock()
    unit.list_accounts.return_value = []
    unit.list_transactions.return_value = []
    context = MagicMock()
    context.__enter__.return_value = unit
    context.__exit__.return_value = False
    store = MagicMock()
    store.unit_of_work.return_value = context

    report = CheckBalanceInvariantUseCase(store, logger=MagicMock()).execute()

    assert report.checked_count == 0
    store.unit_of_work.assert_called_once_with(snapshot=True)
    unit.list_accounts.assert_called_once_with(None)
    unit.list_transactions.assert_called_once_with(None)

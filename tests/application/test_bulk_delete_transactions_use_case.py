"""Tests for the BulkDeleteTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, call

from src.application.use_cases.bulk_delete_transactions import (
    BulkDeleteTransactionsUseCase,
)
from src.domain.models import Transaction


def _transaction(transaction_id, account_id, transaction_type, amount):
    return Transaction(
        id=transaction_id,
        user_id="user-1",
        account_id=account_id,
        type=transaction_type,
        amount=Decimal(amount),
        date=date(2024, 2, 1),
        category="other",
    )


def _build_store(unit: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = unit
    context.__exit__.return_value = False
    store = MagicMock()
    store.unit_of_work.return_value = context
    return store


def _build_unit(found: list[Transaction]) -> MagicMock:
    unit = MagicMock()
    unit.resolve_user_id.return_value = "user-1"
    unit.find_transactions.return_value = found
    unit.delete_transactions.side_effect = lambda ids, user_id: len(ids)
    return unit


def test_execute_applies_one_adjustment_per_account() -> None:
    """Four rows over two accounts produce exactly two adjustments."""
    found = [
        _transaction("tx-1", "acc-a", "EXPENSE", "10.00"),
        _transaction("tx-2", "acc-b", "INCOME", "5.00"),
        _transaction("tx-3", "acc-a", "EXPENSE", "2.50"),
        _transaction("tx-4", "acc-b", "INCOME", "1.25"),
    ]
    unit = _build_unit(found)
    invalidator = MagicMock()
    use_case = BulkDeleteTransactionsUseCase(
        _build_store(unit),
        cache_invalidator=invalidator,
        logger=MagicMock(),
    )

    result = use_case.execute("auth|alice", ["tx-1", "tx-2", "tx-3", "tx-4"])

    assert result.success is True
    assert result.data == {"deleted_count": 4}
    assert result.affected_account_ids == ("acc-a", "acc-b")
    unit.delete_transactions.assert_called_once_with(
        ["tx-1", "tx-2", "tx-3", "tx-4"],
        "user-1",
    )
    assert unit.adjust_balance.call_args_list == [
        call("acc-a", "user-1", Decimal("12.50")),
        call("acc-b", "user-1", Decimal("-6.25")),
    ]
    invalidator.invalidate.assert_called_once_with(
        ["/dashboard", "/transactions", "/account/acc-a", "/account/acc-b"]
    )


def test_execute_refuses_partially_owned_batches() -> None:
    """Two owned ids out of three requested abort the whole batch."""
    unit = _build_unit(
        [
            _transaction("tx-1", "acc-a", "EXPENSE", "10.00"),
            _transaction("tx-2", "acc-a", "EXPENSE", "3.00"),
        ]
    )
    use_case = BulkDeleteTransactionsUseCase(
        _build_store(unit),
        logger=MagicMock(),
    )

    result = use_case.execute("auth|alice", ["tx-1", "tx-2", "tx-foreign"])

    assert result.success is False
    assert result.error_kind == "PartialOwnershipMismatch"
    assert result.error.requested == 3
    assert result.error.resolved == 2
    unit.delete_transactions.assert_not_called()
    unit.adjust_balance.assert_not_called()


def test_execute_collapses_duplicate_ids() -> None:
    unit = _build_unit([_transaction("tx-1", "acc-a", "INCOME", "4.00")])
    use_case = BulkDeleteTransactionsUseCase(
        _build_store(unit),
        logger=MagicMock(),
    )

    result = use_case.execute("auth|alice", ["tx-1", "tx-1"])

    assert result.success is True
    unit.find_transactions.assert_called_once_with(
        ["tx-1"],
        "user-1",
        for_update=True,
    )
    unit.adjust_balance.assert_called_once_with(
        "acc-a",
        "user-1",
        Decimal("-4.00"),
    )


def test_execute_accepts_a_single_id() -> None:
    unit = _build_unit([_transaction("tx-1", "acc-a", "EXPENSE", "9.50")])
    use_case = BulkDeleteTransactionsUseCase(
        _build_store(unit),
        logger=MagicMock(),
    )

    result = use_case.execute("auth|alice", "tx-1")

    assert result.success is True
    assert result.data == {"deleted_count": 1}
    unit.find_transactions.assert_called_once_with(
        ["tx-1"],
        "user-1",
        for_update=True,
    )
    unit.adjust_balance.assert_called_once_with(
        "acc-a",
        "user-1",
        Decimal("9.50"),
    )


def test_execute_with_no_ids_is_a_no_op() -> None:
    store = _build_store(_build_unit([]))
    use_case = BulkDeleteTransactionsUseCase(store, logger=MagicMock())

    result = use_case.execute("auth|alice", [])

    assert result.success is True
    assert result.data == {"deleted_count": 0}
    store.unit_of_work.assert_not_called()


def test_execute_requires_identity() -> None:
    store = _build_store(_build_unit([]))
    use_case = BulkDeleteTransactionsUseCase(store, logger=MagicMock())

    result = use_case.execute("", ["tx-1"])

    assert result.error_kind == "Unauthorized"
    store.unit_of_work.assert_not_called()

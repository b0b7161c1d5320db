"""Tests for the CreateTransactionUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from src.domain.models import Account, Transaction


def _build_store(unit: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = unit
    context.__exit__.return_value = False
    store = MagicMock()
    store.unit_of_work.return_value = context
    return store


def _build_unit() -> MagicMock:
    unit = MagicMock()
    unit.resolve_user_id.return_value = "user-1"
    unit.get_account.return_value = Account(
        id="acc-1",
        user_id="user-1",
        name="Checking",
        account_type="CURRENT",
        balance=Decimal("100.00"),
    )
    unit.insert_transaction.side_effect = (
        lambda user_id, payload, next_date: Transaction(
            id="tx-1",
            user_id=user_id,
            account_id=payload.account_id,
            type=payload.type,
            amount=payload.amount,
            date=payload.date,
            category=payload.category,
            is_recurring=payload.is_recurring,
            recurring_interval=payload.recurring_interval,
            next_recurring_date=next_date,
        )
    )
    return unit


def _payload(**overrides):
    data = {
        "account_id": "acc-1",
        "type": "EXPENSE",
        "amount": "30.00",
        "date": "2024-01-31",
        "category": "groceries",
    }
    data.update(overrides)
    return data


def test_execute_inserts_row_and_applies_signed_delta() -> None:
    """An expense decrements the account through one atomic increment."""
    unit = _build_unit()
    store = _build_store(unit)
    invalidator = MagicMock()
    use_case = CreateTransactionUseCase(
        store,
        cache_invalidator=invalidator,
        logger=MagicMock(),
    )

    result = use_case.execute("auth|alice", _payload())

    assert result.success is True
    assert result.data["amount"] == 30.0
    assert result.data["date"] == "2024-01-31"
    assert result.affected_account_ids == ("acc-1",)
    unit.resolve_user_id.assert_called_once_with("auth|alice")
    unit.get_account.assert_called_once_with("acc-1", "user-1")
    unit.adjust_balance.assert_called_once_with(
        "acc-1",
        "user-1",
        Decimal("-30.00"),
    )
    invalidator.invalidate.assert_called_once_with(
        ["/dashboard", "/account/acc-1"]
    )
    store.unit_of_work.assert_called_once()


def test_execute_computes_next_recurring_date() -> None:
    unit = _build_unit()
    use_case = CreateTransactionUseCase(
        _build_store(unit),
        logger=MagicMock(),
    )

    result = use_case.execute(
        "auth|alice",
        _payload(
            type="INCOME",
            is_recurring=True,
            recurring_interval="MONTHLY",
        ),
    )

    assert unit.insert_transaction.call_args.args[2] == date(2024, 2, 29)
    assert result.data["next_recurring_date"] == "2024-02-29"
    unit.adjust_balance.assert_called_once_with(
        "acc-1",
        "user-1",
        Decimal("30.00"),
    )


def test_execute_fails_when_account_is_not_owned() -> None:
    """A missing account aborts before any row is written."""
    unit = _build_unit()
    unit.get_account.return_value = None
    logger = MagicMock()
    use_case = CreateTransactionUseCase(_build_store(unit), logger=logger)

    result = use_case.execute("auth|alice", _payload(account_id="acc-x"))

    assert result.success is False
    assert result.error_kind == "NotFound"
    assert result.error.identifier == "acc-x"
    unit.insert_transaction.assert_not_called()
    unit.adjust_balance.assert_not_called()
    logger.error.assert_called_once()


def test_execute_rejects_missing_identity_without_opening_a_unit() -> None:
    store = _build_store(_build_unit())
    use_case = CreateTransactionUseCase(store, logger=MagicMock())

    result = use_case.execute(None, _payload())

    assert result.error_kind == "Unauthorized"
    store.unit_of_work.assert_not_called()


def test_execute_reports_unknown_user() -> None:
    unit = _build_unit()
    unit.resolve_user_id.return_value = None
    use_case = CreateTransactionUseCase(_build_store(unit), logger=MagicMock())

    result = use_case.execute("auth|ghost", _payload())

    assert result.error_kind == "NotFound"
    assert result.error.entity == "user"


def test_execute_rejects_invalid_payload() -> None:
    store = _build_store(_build_unit())
    use_case = CreateTransactionUseCase(store, logger=MagicMock())

    result = use_case.execute("auth|alice", _payload(amount="-1"))

    assert result.error_kind == "InvalidPayload"
    assert result.to_dict()["success"] is False
    store.unit_of_work.assert_not_called()

"""Balance arithmetic shared by the ledger use cases.

Every function here is pure: it turns transactions and payloads into the
signed balance adjustments that the store applies as atomic increments.
"""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.errors import InvalidPayload
from src.domain.models.transactions import (
    BalanceAdjustment,
    Transaction,
    TransactionPayload,
)
from src.utils.decimal_utils import coerce_decimal


def signed_contribution(transaction_type: str, amount) -> Decimal:
    """Return the effect of a transaction on its account balance.

    Args:
        transaction_type: EXPENSE or INCOME.
        amount: Unsigned magnitude.

    Returns:
        Decimal: ``amount`` for INCOME, ``-amount`` for EXPENSE.

    Raises:
        InvalidPayload: If the type is not a known transaction type.
    """
    value = coerce_decimal(amount)
    if transaction_type == INCOME:
        return value
    if transaction_type == EXPENSE:
        return -value
    raise InvalidPayload(f"Unknown transaction type: {transaction_type}")


def creation_adjustment(payload: TransactionPayload) -> BalanceAdjustment:
    """Return the balance increment produced by inserting a transaction."""
    return BalanceAdjustment(
        account_id=payload.account_id,
        delta=signed_contribution(payload.type, payload.amount),
    )


def update_adjustments(
    original: Transaction,
    payload: TransactionPayload,
) -> list[BalanceAdjustment]:
    """Return the balance increments produced by updating a transaction.

    A reassignment touches both accounts once each with independent deltas:
    the original account loses the old contribution and the new account
    gains the new one. Otherwise the single account receives the net
    difference in one adjustment.

    Args:
        original: Transaction as currently stored.
        payload: New values for the transaction.

    Returns:
        list[BalanceAdjustment]: Two adjustments on reassignment, one
        otherwise.
    """
    old_delta = signed_contribution(original.type, original.amount)
    new_delta = signed_contribution(payload.type, payload.amount)
    if payload.account_id != original.account_id:
        return [
            BalanceAdjustment(original.account_id, -old_delta),
            BalanceAdjustment(payload.account_id, new_delta),
        ]
    return [BalanceAdjustment(original.account_id, new_delta - old_delta)]


def deletion_adjustments(
    transactions: Iterable[Transaction],
) -> list[BalanceAdjustment]:
    """Return one balance increment per account for a bulk deletion.

    Args:
        transactions: Rows about to be deleted.

    Returns:
        list[BalanceAdjustment]: For each affected account, the negated sum
        of the deleted contributions, ordered by account id.
    """
    accumulated: dict[str, Decimal] = defaultdict(Decimal)
    for transaction in transactions:
        accumulated[transaction.account_id] += signed_contribution(
            transaction.type,
            transaction.amount,
        )
    return [
        BalanceAdjustment(account_id, -total)
        for account_id, total in sorted(accumulated.items())
    ]


def sum_contributions(transactions: Iterable[Transaction]) -> Decimal:
    """Return the balance implied by a set of transactions."""
    return sum(
        (
            signed_contribution(transaction.type, transaction.amount)
            for transaction in transactions
        ),
        Decimal("0"),
    )


__all__ = [
    "signed_contribution",
    "creation_adjustment",
    "update_adjustments",
    "deletion_adjustments",
    "sum_contributions",
]

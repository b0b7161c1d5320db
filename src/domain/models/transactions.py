"""Domain models for ledger transactions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class TransactionPayload:
    """Validated caller-supplied values for creating or updating a row.

    Attributes:
        account_id: Account the transaction belongs to.
        type: EXPENSE or INCOME.
        amount: Unsigned magnitude, strictly positive.
        date: Calendar date of the transaction.
        category: Category tag.
        description: Optional free text.
        is_recurring: Whether the transaction repeats.
        recurring_interval: DAILY, WEEKLY, MONTHLY, YEARLY or None.
    """

    account_id: str
    type: str
    amount: Decimal
    date: date
    category: str
    description: str | None = None
    is_recurring: bool = False
    recurring_interval: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Persisted transaction row."""

    id: str
    user_id: str
    account_id: str
    type: str
    amount: Decimal
    date: date
    category: str
    description: str | None = None
    is_recurring: bool = False
    recurring_interval: str | None = None
    next_recurring_date: date | None = None


@dataclass(frozen=True)
class BalanceAdjustment:
    """Single atomic increment to apply to an account balance."""

    account_id: str
    delta: Decimal


__all__ = ["TransactionPayload", "Transaction", "BalanceAdjustment"]

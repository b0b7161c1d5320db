"""Domain models for ledger accounts."""

from dataclasses import dataclass, field
from decimal import Decimal

from .transactions import Transaction


@dataclass(frozen=True)
class Account:
    """Financial account owned by a single user.

    Attributes:
        id: Opaque account identifier.
        user_id: Internal identifier of the owner.
        name: Display name.
        account_type: Account category tag (CURRENT, SAVINGS).
        balance: Cached signed balance kept in sync with transactions.
        is_default: Whether this is the owner's default account.
    """

    id: str
    user_id: str
    name: str
    account_type: str
    balance: Decimal
    is_default: bool = False


@dataclass(frozen=True)
class AccountSummary:
    """Account with the number of transactions referencing it."""

    account: Account
    transaction_count: int


@dataclass(frozen=True)
class AccountWithTransactions:
    """Account together with its transactions, newest first."""

    account: Account
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def transaction_count(self) -> int:
        """Return the number of transactions attached to the account."""
        return len(self.transactions)


__all__ = ["Account", "AccountSummary", "AccountWithTransactions"]

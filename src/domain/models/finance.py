"""Domain models for balance reconciliation."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class BalanceDiscrepancy:
    """Account whose cached balance differs from its transactions.

    Attributes:
        account_id: Identifier of the inconsistent account.
        account_name: Display name of the account.
        stored_balance: Balance column value.
        computed_balance: Sum of signed transaction contributions.
    """

    account_id: str
    account_name: str
    stored_balance: Decimal
    computed_balance: Decimal

    @property
    def difference(self) -> Decimal:
        """Return stored minus computed balance."""
        return self.stored_balance - self.computed_balance


@dataclass(frozen=True)
class ReconciliationReport:
    """Outcome of a balance reconciliation run."""

    checked_count: int
    discrepancies: list[BalanceDiscrepancy]

    @property
    def is_consistent(self) -> bool:
        """Return True when every checked account is consistent."""
        return not self.discrepancies


__all__ = ["BalanceDiscrepancy", "ReconciliationReport"]

"""Balance invariant checks."""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.accounts import Account
from src.domain.models.finance import BalanceDiscrepancy
from src.domain.models.transactions import Transaction
from src.domain.services.ledger import signed_contribution


def find_balance_discrepancies(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> list[BalanceDiscrepancy]:
    """Compare stored balances with the sum of their transactions.

    Args:
        accounts: Accounts to check.
        transactions: Every transaction referencing those accounts.
        logger: Optional logger used to warn about each discrepancy.

    Returns:
        list[BalanceDiscrepancy]: Inconsistent accounts, ordered by id.
    """
    computed: dict[str, Decimal] = defaultdict(Decimal)
    for transaction in transactions:
        computed[transaction.account_id] += signed_contribution(
            transaction.type,
            transaction.amount,
        )
    discrepancies = []
    for account in sorted(accounts, key=lambda item: item.id):
        expected = computed.get(account.id, Decimal("0"))
        if account.balance == expected:
            continue
        discrepancy = BalanceDiscrepancy(
            account_id=account.id,
            account_name=account.name,
            stored_balance=account.balance,
            computed_balance=expected,
        )
        if logger is not None:
            logger.warning(
                f"Balance mismatch for account={account.id}: "
                f"stored={account.balance} computed={expected}"
            )
        discrepancies.append(discrepancy)
    return discrepancies


__all__ = ["find_balance_discrepancies"]

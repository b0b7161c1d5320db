"""Use case reconciling cached balances with transaction history."""

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import resolve_user
from src.domain.models.finance import ReconciliationReport
from src.domain.services.reconciliation import find_balance_discrepancies
from src.infrastructure.logging.logger import get_app_logger


class CheckBalanceInvariantUseCase:
    """Compare every account balance with the sum of its transactions."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port opening units against the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str | None = None) -> ReconciliationReport:
        """Run the reconciliation.

        Args:
            owner_id: Identity-provider subject restricting the check to one
                user; every account is checked when omitted.

        Returns:
            ReconciliationReport: Number of checked accounts and the
            discrepancies found.

        Raises:
            NotFound: If ``owner_id`` is unknown.
            StoreFailure: If the store cannot be read.
        """
        with self._ledger_store.unit_of_work(snapshot=True) as unit:
            user_id = resolve_user(unit, owner_id) if owner_id else None
            accounts = unit.list_accounts(user_id)
            transactions = unit.list_transactions(user_id)
        discrepancies = find_balance_discrepancies(
            accounts,
            transactions,
            logger=self._logger,
        )
        self._logger.info(
            f"Checked {len(accounts)} account balances, "
            f"{len(discrepancies)} discrepancies"
        )
        return ReconciliationReport(
            checked_count=len(accounts),
            discrepancies=discrepancies,
        )


__all__ = ["CheckBalanceInvariantUseCase"]

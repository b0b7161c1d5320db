"""Use case reading an account with its transaction history."""

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import (
    LedgerResult,
    failure_result,
    resolve_user,
)
from src.domain.errors import LedgerError
from src.domain.models.accounts import AccountWithTransactions
from src.domain.services.normalization import (
    serialize_account_with_transactions,
)
from src.domain.services.validation import require_owner
from src.infrastructure.logging.logger import get_app_logger


class GetAccountWithTransactionsUseCase:
    """Fetch an account, its transactions (newest first) and their count."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str | None, account_id: str) -> LedgerResult:
        """Return the account view.

        Returns:
            LedgerResult: Successful result whose ``data`` is None when the
            account is missing or belongs to another user.
        """
        try:
            require_owner(owner_id)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                account = unit.get_account(account_id, user_id)
                if account is None:
                    return LedgerResult.ok(None)
                view = AccountWithTransactions(
                    account=account,
                    transactions=unit.list_account_transactions(account_id),
                )
        except LedgerError as exc:
            return failure_result(
                exc,
                self._logger,
                "get account with transactions",
            )
        return LedgerResult.ok(serialize_account_with_transactions(view))


__all__ = ["GetAccountWithTransactionsUseCase"]

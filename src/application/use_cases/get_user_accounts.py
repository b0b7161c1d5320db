"""Use case listing the caller's accounts for the dashboard."""

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import (
    LedgerResult,
    failure_result,
    resolve_user,
)
from src.domain.errors import LedgerError
from src.domain.models.accounts import AccountSummary
from src.domain.services.normalization import serialize_account_summary
from src.domain.services.validation import require_owner
from src.infrastructure.logging.logger import get_app_logger


class GetUserAccountsUseCase:
    """List every account of the caller ordered by name."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str | None) -> LedgerResult:
        try:
            require_owner(owner_id)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                accounts = unit.list_accounts(user_id)
                counts = unit.count_transactions_by_account(user_id)
        except LedgerError as exc:
            return failure_result(exc, self._logger, "list accounts")
        summaries = [
            AccountSummary(
                account=account,
                transaction_count=counts.get(account.id, 0),
            )
            for account in accounts
        ]
        return LedgerResult.ok(
            [serialize_account_summary(summary) for summary in summaries]
        )


__all__ = ["GetUserAccountsUseCase"]

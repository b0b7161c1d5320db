"""Use case reading a single transaction."""

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import (
    LedgerResult,
    failure_result,
    resolve_user,
)
from src.domain.errors import LedgerError, NotFound
from src.domain.services.normalization import serialize_transaction
from src.domain.services.validation import require_owner
from src.infrastructure.logging.logger import get_app_logger


class GetTransactionUseCase:
    """Fetch one of the caller's transactions."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str | None, transaction_id: str) -> LedgerResult:
        """Return the serialized transaction or a NotFound failure."""
        try:
            require_owner(owner_id)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                transaction = unit.get_transaction(transaction_id, user_id)
            if transaction is None:
                raise NotFound("transaction", transaction_id)
        except LedgerError as exc:
            return failure_result(exc, self._logger, "get transaction")
        return LedgerResult.ok(serialize_transaction(transaction))


__all__ = ["GetTransactionUseCase"]

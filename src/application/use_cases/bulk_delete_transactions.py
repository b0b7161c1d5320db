"""Use case deleting several transactions and debiting their accounts."""

from collections.abc import Iterable

from src.application.ports.cache_invalidation import (
    CacheInvalidatorPort,
    dashboard_paths,
)
from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import (
    LedgerResult,
    failure_result,
    resolve_user,
)
from src.domain.errors import LedgerError, PartialOwnershipMismatch
from src.domain.services.ledger import deletion_adjustments
from src.domain.services.validation import require_owner
from src.infrastructure.logging.logger import get_app_logger


class BulkDeleteTransactionsUseCase:
    """Delete a batch of transactions with one adjustment per account.

    The batch is all-or-nothing: when any requested id is missing or owned
    by someone else, nothing is deleted.
    """

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        cache_invalidator: CacheInvalidatorPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port opening atomic units against the store.
            cache_invalidator: Optional port notified of stale views.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._cache_invalidator = cache_invalidator
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: str | None,
        transaction_ids: Iterable[str] | str,
    ) -> LedgerResult:
        """Delete the caller's transactions.

        Args:
            owner_id: Identity-provider subject of the caller.
            transaction_ids: Ids to delete, or a single id; duplicates are
                ignored.

        Returns:
            LedgerResult: ``{"deleted_count": n}`` with the affected account
            ids, or a failure (Unauthorized, NotFound,
            PartialOwnershipMismatch, StoreFailure).
        """
        if isinstance(transaction_ids, str):
            transaction_ids = [transaction_ids]
        requested = list(dict.fromkeys(str(item) for item in transaction_ids))
        try:
            require_owner(owner_id)
            if not requested:
                return LedgerResult.ok({"deleted_count": 0})
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                found = unit.find_transactions(
                    requested,
                    user_id,
                    for_update=True,
                )
                if len(found) != len(requested):
                    raise PartialOwnershipMismatch(len(requested), len(found))
                adjustments = deletion_adjustments(found)
                deleted_count = unit.delete_transactions(requested, user_id)
                if deleted_count != len(requested):
                    raise PartialOwnershipMismatch(
                        len(requested),
                        deleted_count,
                    )
                for adjustment in adjustments:
                    unit.adjust_balance(
                        adjustment.account_id,
                        user_id,
                        adjustment.delta,
                    )
        except LedgerError as exc:
            return failure_result(exc, self._logger, "delete transactions")

        affected = tuple(adjustment.account_id for adjustment in adjustments)
        self._logger.info(
            f"Deleted {deleted_count} transactions across "
            f"{len(affected)} accounts"
        )
        if self._cache_invalidator is not None:
            self._cache_invalidator.invalidate(
                dashboard_paths(affected, "/transactions")
            )
        return LedgerResult.ok({"deleted_count": deleted_count}, affected)


__all__ = ["BulkDeleteTransactionsUseCase"]

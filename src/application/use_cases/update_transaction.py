"""Use case updating a transaction and rebalancing affected accounts."""

from collections.abc import Mapping
from typing import Any

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
from src.domain.errors import LedgerError, NotFound
from src.domain.services.ledger import update_adjustments
from src.domain.services.normalization import serialize_transaction
from src.domain.services.recurrence import next_recurring_date
from src.domain.services.validation import (
    parse_transaction_payload,
    require_owner,
)
from src.infrastructure.logging.logger import get_app_logger


class UpdateTransactionUseCase:
    """Overwrite a transaction and move its contribution between balances.

    When the account changes, the original account loses the old signed
    contribution and the new account gains the new one as two separate
    increments. Otherwise the account receives the net difference in a
    single increment. The new account of a reassignment must belong to the
    caller.
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
        transaction_id: str,
        data: Mapping[str, Any],
    ) -> LedgerResult:
        """Update one of the caller's transactions.

        Args:
            owner_id: Identity-provider subject of the caller.
            transaction_id: Identifier of the transaction to update.
            data: Full replacement payload.

        Returns:
            LedgerResult: The updated transaction, or a failure
            (Unauthorized, InvalidPayload, NotFound, StoreFailure).
        """
        try:
            require_owner(owner_id)
            payload = parse_transaction_payload(data)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                original = unit.get_transaction(
                    transaction_id,
                    user_id,
                    for_update=True,
                )
                if original is None:
                    raise NotFound("transaction", transaction_id)
                reassigned = payload.account_id != original.account_id
                if (
                    reassigned
                    and unit.get_account(payload.account_id, user_id) is None
                ):
                    raise NotFound("account", payload.account_id)
                for adjustment in update_adjustments(original, payload):
                    unit.adjust_balance(
                        adjustment.account_id,
                        user_id,
                        adjustment.delta,
                    )
                updated = unit.update_transaction(
                    transaction_id,
                    user_id,
                    payload,
                    next_recurring_date(
                        payload.date,
                        payload.is_recurring,
                        payload.recurring_interval,
                    ),
                )
        except LedgerError as exc:
            return failure_result(exc, self._logger, "update transaction")

        affected = [updated.account_id]
        if reassigned:
            affected.append(original.account_id)
        self._logger.info(
            f"Updated transaction {transaction_id} "
            f"(accounts={', '.join(affected)})"
        )
        if self._cache_invalidator is not None:
            self._cache_invalidator.invalidate(dashboard_paths(affected))
        return LedgerResult.ok(serialize_transaction(updated), tuple(affected))


__all__ = ["UpdateTransactionUseCase"]

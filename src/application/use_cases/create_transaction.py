"""Use case creating a transaction and crediting its account."""

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
from src.domain.services.ledger import creation_adjustment
from src.domain.services.normalization import serialize_transaction
from src.domain.services.recurrence import next_recurring_date
from src.domain.services.validation import (
    parse_transaction_payload,
    require_owner,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateTransactionUseCase:
    """Insert a transaction and apply its signed contribution atomically."""

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
        data: Mapping[str, Any],
    ) -> LedgerResult:
        """Create a transaction for one of the caller's accounts.

        Args:
            owner_id: Identity-provider subject of the caller.
            data: Raw transaction payload.

        Returns:
            LedgerResult: The created transaction, or a failure
            (Unauthorized, InvalidPayload, NotFound, StoreFailure).
        """
        try:
            require_owner(owner_id)
            payload = parse_transaction_payload(data)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                if unit.get_account(payload.account_id, user_id) is None:
                    raise NotFound("account", payload.account_id)
                transaction = unit.insert_transaction(
                    user_id,
                    payload,
                    next_recurring_date(
                        payload.date,
                        payload.is_recurring,
                        payload.recurring_interval,
                    ),
                )
                adjustment = creation_adjustment(payload)
                unit.adjust_balance(
                    adjustment.account_id,
                    user_id,
                    adjustment.delta,
                )
        except LedgerError as exc:
            return failure_result(exc, self._logger, "create transaction")

        self._logger.info(
            f"Created transaction {transaction.id} on account "
            f"{transaction.account_id} (delta={adjustment.delta})"
        )
        if self._cache_invalidator is not None:
            self._cache_invalidator.invalidate(
                dashboard_paths([transaction.account_id])
            )
        return LedgerResult.ok(
            serialize_transaction(transaction),
            (transaction.account_id,),
        )


__all__ = ["CreateTransactionUseCase"]

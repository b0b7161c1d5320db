"""Use case switching the caller's default account."""

from src.application.ports.cache_invalidation import CacheInvalidatorPort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.results import (
    LedgerResult,
    failure_result,
    resolve_user,
)
from src.domain.errors import LedgerError, NotFound
from src.domain.services.normalization import serialize_account
from src.domain.services.validation import require_owner
from src.infrastructure.logging.logger import get_app_logger


class UpdateDefaultAccountUseCase:
    """Make one account the owner's only default account.

    Clearing the previous default and setting the new one share a unit of
    work, so a missing account leaves the previous default in place.
    """

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        cache_invalidator: CacheInvalidatorPort | None = None,
        logger=None,
    ) -> None:
        self._ledger_store = ledger_store
        self._cache_invalidator = cache_invalidator
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str | None, account_id: str) -> LedgerResult:
        try:
            require_owner(owner_id)
            with self._ledger_store.unit_of_work() as unit:
                user_id = resolve_user(unit, owner_id)
                unit.clear_default_account(user_id)
                account = unit.set_default_account(account_id, user_id)
                if account is None:
                    raise NotFound("account", account_id)
        except LedgerError as exc:
            return failure_result(exc, self._logger, "update default account")

        self._logger.info(f"Default account set to {account_id}")
        if self._cache_invalidator is not None:
            self._cache_invalidator.invalidate(["/dashboard"])
        return LedgerResult.ok(serialize_account(account), (account_id,))


__all__ = ["UpdateDefaultAccountUseCase"]

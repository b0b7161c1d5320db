"""Result values returned by every ledger use case.

Use cases raise ``LedgerError`` inside the unit of work so the store rolls
back, then convert the error into a failed ``LedgerResult`` at their
boundary. Callers branch on ``success`` and ``error_kind`` instead of
catching exceptions.
"""

from dataclasses import dataclass
from typing import Any

from src.application.ports.ledger_store import LedgerUnitOfWork
from src.domain.errors import LedgerError, NotFound
from src.domain.services.validation import require_owner


@dataclass(frozen=True)
class LedgerResult:
    """Outcome of a ledger operation.

    Attributes:
        success: True when the operation committed.
        data: Transport-ready payload (dicts with float amounts).
        error: Failure raised by the operation, when unsuccessful.
        affected_account_ids: Accounts whose cached views are stale.
    """

    success: bool
    data: Any = None
    error: LedgerError | None = None
    affected_account_ids: tuple[str, ...] = ()

    @classmethod
    def ok(
        cls,
        data: Any = None,
        affected_account_ids: tuple[str, ...] = (),
    ) -> "LedgerResult":
        return cls(
            success=True,
            data=data,
            affected_account_ids=tuple(affected_account_ids),
        )

    @classmethod
    def failure(cls, error: LedgerError) -> "LedgerResult":
        return cls(success=False, error=error)

    @property
    def error_kind(self) -> str | None:
        """Return the failure kind, or None on success."""
        return self.error.kind if self.error is not None else None

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a plain dictionary."""
        payload: dict[str, Any] = {"success": self.success}
        if self.success:
            payload["data"] = self.data
            payload["affected_account_ids"] = list(self.affected_account_ids)
        else:
            payload["error"] = self.error.to_dict()
        return payload


def resolve_user(unit: LedgerUnitOfWork, owner_id: str | None) -> str:
    """Map the caller identity to the internal user id.

    Raises:
        Unauthorized: If no identity was supplied.
        NotFound: If the identity is unknown to the ledger.
    """
    auth_user_id = require_owner(owner_id)
    user_id = unit.resolve_user_id(auth_user_id)
    if user_id is None:
        raise NotFound("user", auth_user_id)
    return user_id


def failure_result(error: LedgerError, logger, action: str) -> LedgerResult:
    """Log a failed operation and wrap the error in a result."""
    suffix = f" ({error.identifier})" if error.identifier else ""
    logger.error(f"Failed to {action}: {error.kind}: {error.message}{suffix}")
    return LedgerResult.failure(error)


__all__ = ["LedgerResult", "resolve_user", "failure_result"]

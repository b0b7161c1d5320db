"""Error taxonomy for ledger operations.

Every error carries a ``kind`` string so callers can tell failures apart
without inspecting exception classes, plus the affected identifier when one
exists. Errors are raised inside a unit of work (forcing a rollback) and
returned to callers as ``LedgerResult`` failures.
"""


class LedgerError(Exception):
    """Base class for every ledger failure."""

    kind = "LedgerError"

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.identifier = identifier

    def to_dict(self) -> dict[str, str | None]:
        """Return a transport-friendly description of the failure."""
        return {
            "kind": self.kind,
            "message": self.message,
            "id": self.identifier,
        }


class Unauthorized(LedgerError):
    """No valid caller identity was supplied."""

    kind = "Unauthorized"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFound(LedgerError):
    """A referenced record is missing or not owned by the caller."""

    kind = "NotFound"

    def __init__(self, entity: str, identifier: str | None = None) -> None:
        super().__init__(f"{entity.capitalize()} not found", identifier)
        self.entity = entity


class PartialOwnershipMismatch(LedgerError):
    """A bulk request resolved to fewer owned records than requested."""

    kind = "PartialOwnershipMismatch"

    def __init__(self, requested: int, resolved: int) -> None:
        super().__init__(
            "One or more transactions were not found or you do not have "
            f"permission to delete them (requested={requested}, "
            f"resolved={resolved})"
        )
        self.requested = requested
        self.resolved = resolved


class StoreFailure(LedgerError):
    """The data store could not complete the atomic unit."""

    kind = "StoreFailure"


class InvalidPayload(LedgerError):
    """A transaction payload failed validation."""

    kind = "InvalidPayload"


class ReceiptScanFailed(LedgerError):
    """The receipt scanner did not return a usable record."""

    kind = "ReceiptScanFailed"


__all__ = [
    "LedgerError",
    "Unauthorized",
    "NotFound",
    "PartialOwnershipMismatch",
    "StoreFailure",
    "InvalidPayload",
    "ReceiptScanFailed",
]

"""Domain package for ledger rules and core models."""

from .constants import EXPENSE, INCOME, RECURRING_INTERVALS, TRANSACTION_TYPES
from .errors import (
    InvalidPayload,
    LedgerError,
    NotFound,
    PartialOwnershipMismatch,
    ReceiptScanFailed,
    StoreFailure,
    Unauthorized,
)
from .models import (
    Account,
    AccountSummary,
    AccountWithTransactions,
    BalanceAdjustment,
    Transaction,
    TransactionPayload,
)

__all__ = [
    "EXPENSE",
    "INCOME",
    "RECURRING_INTERVALS",
    "TRANSACTION_TYPES",
    "InvalidPayload",
    "LedgerError",
    "NotFound",
    "PartialOwnershipMismatch",
    "ReceiptScanFailed",
    "StoreFailure",
    "Unauthorized",
    "Account",
    "AccountSummary",
    "AccountWithTransactions",
    "BalanceAdjustment",
    "Transaction",
    "TransactionPayload",
]

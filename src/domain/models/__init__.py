"""Domain models package."""

from .accounts import Account, AccountSummary, AccountWithTransactions
from .finance import BalanceDiscrepancy, ReconciliationReport
from .receipts import ScannedReceipt
from .transactions import BalanceAdjustment, Transaction, TransactionPayload

__all__ = [
    "Account",
    "AccountSummary",
    "AccountWithTransactions",
    "BalanceAdjustment",
    "BalanceDiscrepancy",
    "ReconciliationReport",
    "ScannedReceipt",
    "Transaction",
    "TransactionPayload",
]

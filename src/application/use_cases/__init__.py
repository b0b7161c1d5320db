"""Application use cases package."""

from .bulk_delete_transactions import BulkDeleteTransactionsUseCase
from .check_balance_invariant import CheckBalanceInvariantUseCase
from .create_transaction import CreateTransactionUseCase
from .get_account_with_transactions import GetAccountWithTransactionsUseCase
from .get_transaction import GetTransactionUseCase
from .get_user_accounts import GetUserAccountsUseCase
from .results import LedgerResult
from .scan_receipt import ScanReceiptUseCase
from .update_default_account import UpdateDefaultAccountUseCase
from .update_transaction import UpdateTransactionUseCase

__all__ = [
    "BulkDeleteTransactionsUseCase",
    "CheckBalanceInvariantUseCase",
    "CreateTransactionUseCase",
    "GetAccountWithTransactionsUseCase",
    "GetTransactionUseCase",
    "GetUserAccountsUseCase",
    "LedgerResult",
    "ScanReceiptUseCase",
    "UpdateDefaultAccountUseCase",
    "UpdateTransactionUseCase",
]

"""Composition root for wiring infrastructure adapters."""

from src.application.ports.cache_invalidation import CacheInvalidatorPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.receipt_scanner import ReceiptScannerPort
from src.application.use_cases.bulk_delete_transactions import (
    BulkDeleteTransactionsUseCase,
)
from src.application.use_cases.check_balance_invariant import (
    CheckBalanceInvariantUseCase,
)
from src.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from src.application.use_cases.get_account_with_transactions import (
    GetAccountWithTransactionsUseCase,
)
from src.application.use_cases.get_transaction import GetTransactionUseCase
from src.application.use_cases.get_user_accounts import GetUserAccountsUseCase
from src.application.use_cases.scan_receipt import ScanReceiptUseCase
from src.application.use_cases.update_default_account import (
    UpdateDefaultAccountUseCase,
)
from src.application.use_cases.update_transaction import (
    UpdateTransactionUseCase,
)
from src.infrastructure.cache_invalidation import (
    LoggingCacheInvalidator,
    NullCacheInvalidator,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.tables import create_schema


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the SQLAlchemy ledger store, creating tables when enabled."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.create_schema:
        create_schema(resolved_db.get_ledger_engine())
    return SqlAlchemyLedgerStore(resolved_db, logger=get_app_logger())


def build_cache_invalidator(
    settings: LedgerSettings | None = None,
) -> CacheInvalidatorPort:
    """Return the configured cache invalidator."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.cache_invalidation == "none":
        return NullCacheInvalidator()
    return LoggingCacheInvalidator()


def build_create_transaction(
    store: LedgerStorePort | None = None,
) -> CreateTransactionUseCase:
    """Return a wired CreateTransactionUseCase."""
    return CreateTransactionUseCase(
        store or build_ledger_store(),
        cache_invalidator=build_cache_invalidator(),
        logger=get_app_logger(),
    )


def build_update_transaction(
    store: LedgerStorePort | None = None,
) -> UpdateTransactionUseCase:
    """Return a wired UpdateTransactionUseCase."""
    return UpdateTransactionUseCase(
        store or build_ledger_store(),
        cache_invalidator=build_cache_invalidator(),
        logger=get_app_logger(),
    )


def build_bulk_delete_transactions(
    store: LedgerStorePort | None = None,
) -> BulkDeleteTransactionsUseCase:
    """Return a wired BulkDeleteTransactionsUseCase."""
    return BulkDeleteTransactionsUseCase(
        store or build_ledger_store(),
        cache_invalidator=build_cache_invalidator(),
        logger=get_app_logger(),
    )


def build_get_transaction(
    store: LedgerStorePort | None = None,
) -> GetTransactionUseCase:
    """Return a wired GetTransactionUseCase."""
    return GetTransactionUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_get_account_with_transactions(
    store: LedgerStorePort | None = None,
) -> GetAccountWithTransactionsUseCase:
    """Return a wired GetAccountWithTransactionsUseCase."""
    return GetAccountWithTransactionsUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_get_user_accounts(
    store: LedgerStorePort | None = None,
) -> GetUserAccountsUseCase:
    """Return a wired GetUserAccountsUseCase."""
    return GetUserAccountsUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_update_default_account(
    store: LedgerStorePort | None = None,
) -> UpdateDefaultAccountUseCase:
    """Return a wired UpdateDefaultAccountUseCase."""
    return UpdateDefaultAccountUseCase(
        store or build_ledger_store(),
        cache_invalidator=build_cache_invalidator(),
        logger=get_app_logger(),
    )


def build_check_balance_invariant(
    store: LedgerStorePort | None = None,
) -> CheckBalanceInvariantUseCase:
    """Return a wired CheckBalanceInvariantUseCase."""
    return CheckBalanceInvariantUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_scan_receipt(scanner: ReceiptScannerPort) -> ScanReceiptUseCase:
    """Return a ScanReceiptUseCase around the given model client."""
    return ScanReceiptUseCase(scanner, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_cache_invalidator",
    "build_create_transaction",
    "build_update_transaction",
    "build_bulk_delete_transactions",
    "build_get_transaction",
    "build_get_account_with_transactions",
    "build_get_user_accounts",
    "build_update_default_account",
    "build_check_balance_invariant",
    "build_scan_receipt",
]

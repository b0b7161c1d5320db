"""Application ports package."""

from .cache_invalidation import CacheInvalidatorPort, dashboard_paths
from .database import DatabaseEnginePort
from .ledger_store import LedgerStorePort, LedgerUnitOfWork
from .receipt_scanner import ReceiptScannerPort

__all__ = [
    "CacheInvalidatorPort",
    "DatabaseEnginePort",
    "LedgerStorePort",
    "LedgerUnitOfWork",
    "ReceiptScannerPort",
    "dashboard_paths",
]

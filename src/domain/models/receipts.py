"""Domain model for scanned receipts."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ScannedReceipt:
    """Structured record extracted from a receipt image."""

    amount: Decimal
    date: date | None
    description: str
    merchant_name: str
    category: str


__all__ = ["ScannedReceipt"]
